"""Templates, their records and applying them to domains."""

from __future__ import annotations

from dataclasses import dataclass

from .api import (
    BaseService,
    ListOptions,
    Model,
    Omit,
    Response,
    add_url_query_options,
    json_field,
    versioned,
)


@dataclass
class Template(Model):
    """A template of DNS records."""

    id: int = 0
    sid: str = ""
    account_id: int = 0
    name: str = ""
    description: str = ""
    created_at: str = ""
    updated_at: str = ""


@dataclass
class TemplateRecord(Model):
    """A DNS record belonging to a template."""

    id: int = 0
    template_id: int = 0
    name: str = json_field("", omit=Omit.NEVER)
    content: str = ""
    ttl: int = 0
    type: str = ""
    priority: int = 0
    created_at: str = ""
    updated_at: str = ""


def template_path(account_id, template_identifier="") -> str:
    path = f"/{account_id}/templates"
    if template_identifier:
        path += f"/{template_identifier}"
    return path


def template_record_path(account_id, template_identifier, template_record_id=0) -> str:
    base = template_path(account_id, template_identifier)
    if template_record_id:
        return f"{base}/records/{template_record_id}"
    return f"{base}/records"


def _domain_path(account_id, domain_identifier) -> str:
    return f"/{account_id}/domains/{domain_identifier}"


class TemplatesService(BaseService):
    """Calls for templates and template records."""

    def list_templates(self, account_id, options: ListOptions | None = None) -> Response[list[Template]]:
        path = add_url_query_options(versioned(template_path(account_id, "")), options)
        return self._call("GET", path, model=Template, many=True)

    def create_template(self, account_id, template_attributes: Template) -> Response[Template]:
        path = versioned(template_path(account_id, ""))
        return self._call("POST", path, template_attributes, model=Template)

    def get_template(self, account_id, template_identifier) -> Response[Template]:
        path = versioned(template_path(account_id, template_identifier))
        return self._call("GET", path, model=Template)

    def update_template(
        self, account_id, template_identifier, template_attributes: Template
    ) -> Response[Template]:
        path = versioned(template_path(account_id, template_identifier))
        return self._call("PATCH", path, template_attributes, model=Template)

    def delete_template(self, account_id, template_identifier) -> Response[Template]:
        return self._call("DELETE", versioned(template_path(account_id, template_identifier)))

    def apply_template(self, account_id, template_identifier, domain_identifier) -> Response[Template]:
        path = versioned(f"{_domain_path(account_id, domain_identifier)}/templates/{template_identifier}")
        return self._call("POST", path)

    def list_template_records(
        self, account_id, template_identifier, options: ListOptions | None = None
    ) -> Response[list[TemplateRecord]]:
        path = versioned(template_record_path(account_id, template_identifier, 0))
        path = add_url_query_options(path, options)
        return self._call("GET", path, model=TemplateRecord, many=True)

    def create_template_record(
        self, account_id, template_identifier, template_record_attributes: TemplateRecord
    ) -> Response[TemplateRecord]:
        path = versioned(template_record_path(account_id, template_identifier, 0))
        return self._call("POST", path, template_record_attributes, model=TemplateRecord)

    def get_template_record(
        self, account_id, template_identifier, template_record_id
    ) -> Response[TemplateRecord]:
        path = versioned(template_record_path(account_id, template_identifier, template_record_id))
        return self._call("GET", path, model=TemplateRecord)

    def delete_template_record(
        self, account_id, template_identifier, template_record_id
    ) -> Response[TemplateRecord]:
        path = versioned(template_record_path(account_id, template_identifier, template_record_id))
        return self._call("DELETE", path)
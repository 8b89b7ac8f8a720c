"""One-click services and their application to domains."""

from __future__ import annotations

from dataclasses import dataclass, field

from .api import BaseService, ListOptions, Model, Response, add_url_query_options, versioned


@dataclass
class ServiceSetting(Model):
    """A single setting of a one-click service."""

    name: str = ""
    label: str = ""
    append: str = ""
    description: str = ""
    example: str = ""
    password: bool = False


@dataclass
class Service(Model):
    """A one-click service."""

    id: int = 0
    sid: str = ""
    name: str = ""
    description: str = ""
    setup_description: str = ""
    requires_setup: bool = False
    default_subdomain: str = ""
    created_at: str = ""
    updated_at: str = ""
    settings: list[ServiceSetting] = field(default_factory=list)


@dataclass
class DomainServiceSettings(Model):
    """Optional settings used when applying a service to a domain."""

    settings: dict[str, str] = field(default_factory=dict)


def service_path(service_identifier: str = "") -> str:
    path = "/services"
    if service_identifier:
        path += f"/{service_identifier}"
    return path


def domain_services_path(account_id, domain_identifier, service_identifier="") -> str:
    path = f"/{account_id}/domains/{domain_identifier}/services"
    if service_identifier:
        path += f"/{service_identifier}"
    return path


class ServicesService(BaseService):
    """Calls for one-click services."""

    def list_services(self, options: ListOptions | None = None) -> Response[list[Service]]:
        path = add_url_query_options(versioned(service_path("")), options)
        return self._call("GET", path, model=Service, many=True)

    def get_service(self, service_identifier) -> Response[Service]:
        return self._call("GET", versioned(service_path(service_identifier)), model=Service)

    def applied_services(
        self, account_id, domain_identifier, options: ListOptions | None = None
    ) -> Response[list[Service]]:
        path = versioned(domain_services_path(account_id, domain_identifier, ""))
        path = add_url_query_options(path, options)
        return self._call("GET", path, model=Service, many=True)

    def apply_service(
        self, account_id, service_identifier, domain_identifier, settings: DomainServiceSettings
    ) -> Response[Service]:
        path = versioned(domain_services_path(account_id, domain_identifier, service_identifier))
        return self._call("POST", path, settings)

    def unapply_service(self, account_id, service_identifier, domain_identifier) -> Response[Service]:
        path = versioned(domain_services_path(account_id, domain_identifier, service_identifier))
        return self._call("DELETE", path)
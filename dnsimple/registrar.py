"""Registrar calls: transfer locks, registrant changes and whois privacy."""

from __future__ import annotations

from dataclasses import dataclass, field

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
class DomainTransferLock(Model):
    """Whether the transfer lock of a domain is on."""

    _omit = Omit.NEVER

    enabled: bool = False


@dataclass
class CreateRegistrantChangeInput(Model):
    """What is sent to start a registrant change."""

    _omit = Omit.NEVER

    domain_id: str = ""
    contact_id: str = ""
    extended_attributes: dict[str, str] = field(default_factory=dict)


@dataclass
class RegistrantChange(Model):
    """A change of the registrant of a domain.

    The state is one of "new", "pending", "cancelling", "cancelled" or "completed".
    """

    _omit = Omit.NEVER

    id: int = 0
    account_id: int = 0
    contact_id: int = 0
    domain_id: int = 0
    state: str = ""
    extended_attributes: dict[str, str] = field(default_factory=dict)
    registry_owner_change: bool = False
    irt_lock_lifted_by: str = ""
    created_at: str = ""
    updated_at: str = ""


@dataclass
class RegistrantChangeListOptions(ListOptions):
    """Filters, paging and sorting for listing registrant changes."""

    state: str | None = None
    domain_id: str | None = None
    contact_id: str | None = None


@dataclass
class CheckRegistrantChangeInput(Model):
    """What is sent to check the requirements of a registrant change."""

    _omit = Omit.NEVER

    domain_id: str = ""
    contact_id: str = ""


@dataclass
class ExtendedAttributeOption(Model):
    """One value an extended attribute may take."""

    _omit = Omit.NEVER

    title: str = ""
    value: str = ""
    description: str = ""


@dataclass
class ExtendedAttribute(Model):
    """An extended attribute needed by a registrant change."""

    _omit = Omit.NEVER

    name: str = ""
    description: str = ""
    required: bool = False
    options: list[ExtendedAttributeOption] = field(default_factory=list)


@dataclass
class RegistrantChangeCheck(Model):
    """The requirements of a registrant change."""

    _omit = Omit.NEVER

    domain_id: int = 0
    contact_id: int = 0
    extended_attributes: list[ExtendedAttribute] = field(default_factory=list)
    registry_owner_change: bool = False


@dataclass
class WhoisPrivacy(Model):
    """The whois privacy of a domain."""

    id: int = 0
    domain_id: int = 0
    enabled: bool = False
    expires_on: str = ""
    created_at: str = ""
    updated_at: str = ""


@dataclass
class WhoisPrivacyRenewal(Model):
    """A renewal of the whois privacy of a domain."""

    id: int = 0
    domain_id: int = 0
    whois_privacy_id: int = 0
    state: str = json_field("", key="string")
    enabled: bool = False
    expires_on: str = ""
    created_at: str = ""
    updated_at: str = ""


def _transfer_lock_path(account_id, domain_identifier) -> str:
    return f"/{account_id}/registrar/domains/{domain_identifier}/transfer_lock"


def _registrant_changes_path(account_id, suffix="") -> str:
    path = f"/{account_id}/registrar/registrant_changes"
    if suffix != "":
        path += f"/{suffix}"
    return path


def _whois_privacy_path(account_id, domain_name) -> str:
    return f"/{account_id}/registrar/domains/{domain_name}/whois_privacy"


class RegistrarService(BaseService):
    """Calls for the registrar."""

    def get_domain_transfer_lock(self, account_id, domain_identifier) -> Response[DomainTransferLock]:
        path = versioned(_transfer_lock_path(account_id, domain_identifier))
        return self._call("GET", path, model=DomainTransferLock)

    def enable_domain_transfer_lock(self, account_id, domain_identifier) -> Response[DomainTransferLock]:
        path = versioned(_transfer_lock_path(account_id, domain_identifier))
        return self._call("POST", path, model=DomainTransferLock)

    def disable_domain_transfer_lock(self, account_id, domain_identifier) -> Response[DomainTransferLock]:
        path = versioned(_transfer_lock_path(account_id, domain_identifier))
        return self._call("DELETE", path, model=DomainTransferLock)

    def list_registrant_change(
        self, account_id, options: RegistrantChangeListOptions | None = None
    ) -> Response[list[RegistrantChange]]:
        path = add_url_query_options(versioned(_registrant_changes_path(account_id)), options)
        return self._call("GET", path, model=RegistrantChange, many=True)

    def create_registrant_change(
        self, account_id, change_input: CreateRegistrantChangeInput
    ) -> Response[RegistrantChange]:
        path = versioned(_registrant_changes_path(account_id))
        return self._call("POST", path, change_input, model=RegistrantChange)

    def check_registrant_change(
        self, account_id, check_input: CheckRegistrantChangeInput
    ) -> Response[RegistrantChangeCheck]:
        path = versioned(_registrant_changes_path(account_id, "check"))
        return self._call("POST", path, check_input, model=RegistrantChangeCheck)

    def get_registrant_change(self, account_id, registrant_change) -> Response[RegistrantChange]:
        path = versioned(_registrant_changes_path(account_id, registrant_change))
        return self._call("GET", path, model=RegistrantChange)

    def delete_registrant_change(self, account_id, registrant_change) -> Response[None]:
        path = versioned(_registrant_changes_path(account_id, registrant_change))
        return self._call("DELETE", path)

    def get_whois_privacy(self, account_id, domain_name) -> Response[WhoisPrivacy]:
        return self._call("GET", versioned(_whois_privacy_path(account_id, domain_name)), model=WhoisPrivacy)

    def enable_whois_privacy(self, account_id, domain_name) -> Response[WhoisPrivacy]:
        return self._call("PUT", versioned(_whois_privacy_path(account_id, domain_name)), model=WhoisPrivacy)

    def disable_whois_privacy(self, account_id, domain_name) -> Response[WhoisPrivacy]:
        return self._call(
            "DELETE", versioned(_whois_privacy_path(account_id, domain_name)), model=WhoisPrivacy
        )

    def renew_whois_privacy(self, account_id, domain_name) -> Response[WhoisPrivacyRenewal]:
        path = versioned(f"{_whois_privacy_path(account_id, domain_name)}/renewals")
        return self._call("POST", path, model=WhoisPrivacyRenewal)
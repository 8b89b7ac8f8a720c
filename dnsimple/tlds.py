"""Top-level domains supported for registration."""

from __future__ import annotations

from dataclasses import dataclass, field

from .api import BaseService, ListOptions, Model, Omit, Response, add_url_query_options, versioned


@dataclass
class Tld(Model):
    """A top-level domain and what it supports."""

    _omit = Omit.NEVER

    tld: str = ""
    tld_type: int = 0
    whois_privacy: bool = False
    auto_renew_only: bool = False
    minimum_registration: int = 0
    registration_enabled: bool = False
    renewal_enabled: bool = False
    transfer_enabled: bool = False
    dnssec_interface_type: str = ""


@dataclass
class TldExtendedAttributeOption(Model):
    """One value an extended attribute may take."""

    _omit = Omit.NEVER

    title: str = ""
    value: str = ""
    description: str = ""


@dataclass
class TldExtendedAttribute(Model):
    """An extended attribute supported or required by a TLD."""

    _omit = Omit.NEVER

    name: str = ""
    description: str = ""
    required: bool = False
    options: list[TldExtendedAttributeOption] = field(default_factory=list)


class TldsService(BaseService):
    """Calls for TLD information."""

    def list_tlds(self, options: ListOptions | None = None) -> Response[list[Tld]]:
        path = add_url_query_options(versioned("/tlds"), options)
        return self._call("GET", path, model=Tld, many=True)

    def get_tld(self, tld) -> Response[Tld]:
        return self._call("GET", versioned(f"/tlds/{tld}"), model=Tld)

    def get_tld_extended_attributes(self, tld) -> Response[list[TldExtendedAttribute]]:
        path = versioned(f"/tlds/{tld}/extended_attributes")
        return self._call("GET", path, model=TldExtendedAttribute, many=True)
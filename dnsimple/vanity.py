"""Vanity name servers for domains."""

from __future__ import annotations

from dataclasses import dataclass

from .api import BaseService, Model, Response, versioned


@dataclass
class VanityNameServer(Model):
    """A single vanity name server."""

    id: int = 0
    name: str = ""
    ipv4: str = ""
    ipv6: str = ""
    created_at: str = ""
    updated_at: str = ""


def vanity_name_server_path(account_id, domain_identifier) -> str:
    return f"/{account_id}/vanity/{domain_identifier}"


class VanityNameServersService(BaseService):
    """Calls for vanity name servers."""

    def enable_vanity_name_servers(
        self, account_id, domain_identifier
    ) -> Response[list[VanityNameServer]]:
        path = versioned(vanity_name_server_path(account_id, domain_identifier))
        return self._call("PUT", path, model=VanityNameServer, many=True)

    def disable_vanity_name_servers(
        self, account_id, domain_identifier
    ) -> Response[list[VanityNameServer]]:
        path = versioned(vanity_name_server_path(account_id, domain_identifier))
        return self._call("DELETE", path)
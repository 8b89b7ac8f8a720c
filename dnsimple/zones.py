"""Zones, zone files, zone records and distribution checks."""

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
class Zone(Model):
    """A DNS zone."""

    id: int = 0
    account_id: int = 0
    name: str = ""
    reverse: bool = False
    secondary: bool = False
    last_transferred_at: str = ""
    active: bool = False
    created_at: str = ""
    updated_at: str = ""


@dataclass
class ZoneFile(Model):
    """The text of a zone file."""

    zone: str = ""


@dataclass
class ZoneListOptions(ListOptions):
    """Filters, paging and sorting for listing zones."""

    name_like: str | None = None


@dataclass
class ZoneDistribution(Model):
    """Whether a zone or record has reached every name server."""

    _omit = Omit.NEVER

    distributed: bool = False


@dataclass
class ZoneRecord(Model):
    """A record in a zone."""

    id: int = 0
    zone_id: str = ""
    parent_id: int = 0
    type: str = ""
    name: str = json_field("", omit=Omit.NEVER)
    content: str = ""
    ttl: int = 0
    priority: int = 0
    system_record: bool = False
    regions: list[str] = field(default_factory=list)
    created_at: str = ""
    updated_at: str = ""


@dataclass
class ZoneRecordAttributes(Model):
    """What is sent to create or update a zone record.

    A name of None is left out, while an empty name is sent as is, which
    addresses the apex of the zone.
    """

    zone_id: str = ""
    type: str = ""
    name: str | None = json_field(None, omit=Omit.NONE)
    content: str = ""
    ttl: int = 0
    priority: int = 0
    regions: list[str] = field(default_factory=list)


@dataclass
class ZoneRecordListOptions(ListOptions):
    """Filters, paging and sorting for listing zone records."""

    name: str | None = None
    name_like: str | None = None
    type: str | None = None


def _zone_path(account_id, zone_name="") -> str:
    path = f"/{account_id}/zones"
    if zone_name:
        path += f"/{zone_name}"
    return path


def zone_record_path(account_id, zone_name, record_id=0) -> str:
    path = f"{_zone_path(account_id, zone_name)}/records"
    if record_id:
        path += f"/{record_id}"
    return path


class ZonesService(BaseService):
    """Calls for zones and zone records."""

    def list_zones(self, account_id, options: ZoneListOptions | None = None) -> Response[list[Zone]]:
        path = add_url_query_options(versioned(_zone_path(account_id)), options)
        return self._call("GET", path, model=Zone, many=True)

    def get_zone(self, account_id, zone_name) -> Response[Zone]:
        return self._call("GET", versioned(_zone_path(account_id, zone_name)), model=Zone)

    def get_zone_file(self, account_id, zone_name) -> Response[ZoneFile]:
        path = versioned(f"{_zone_path(account_id, zone_name)}/file")
        return self._call("GET", path, model=ZoneFile)

    def activate_zone_dns(self, account_id, zone_name) -> Response[Zone]:
        path = versioned(f"{_zone_path(account_id, zone_name)}/activation")
        return self._call("PUT", path, model=Zone)

    def deactivate_zone_dns(self, account_id, zone_name) -> Response[Zone]:
        path = versioned(f"{_zone_path(account_id, zone_name)}/activation")
        return self._call("DELETE", path, model=Zone)

    def check_zone_distribution(self, account_id, zone_name) -> Response[ZoneDistribution]:
        path = versioned(f"{_zone_path(account_id, zone_name)}/distribution")
        return self._call("GET", path, model=ZoneDistribution)

    def check_zone_record_distribution(
        self, account_id, zone_name, record_id
    ) -> Response[ZoneDistribution]:
        path = versioned(f"{_zone_path(account_id, zone_name)}/records/{record_id}/distribution")
        return self._call("GET", path, model=ZoneDistribution)

    def list_records(
        self, account_id, zone_name, options: ZoneRecordListOptions | None = None
    ) -> Response[list[ZoneRecord]]:
        path = add_url_query_options(versioned(zone_record_path(account_id, zone_name, 0)), options)
        return self._call("GET", path, model=ZoneRecord, many=True)

    def create_record(
        self, account_id, zone_name, record_attributes: ZoneRecordAttributes
    ) -> Response[ZoneRecord]:
        path = versioned(zone_record_path(account_id, zone_name, 0))
        return self._call("POST", path, record_attributes, model=ZoneRecord)

    def get_record(self, account_id, zone_name, record_id) -> Response[ZoneRecord]:
        path = versioned(zone_record_path(account_id, zone_name, record_id))
        return self._call("GET", path, model=ZoneRecord)

    def update_record(
        self, account_id, zone_name, record_id, record_attributes: ZoneRecordAttributes
    ) -> Response[ZoneRecord]:
        path = versioned(zone_record_path(account_id, zone_name, record_id))
        return self._call("PATCH", path, record_attributes, model=ZoneRecord)

    def delete_record(self, account_id, zone_name, record_id) -> Response[ZoneRecord]:
        """Permanently delete a record from the zone."""
        path = versioned(zone_record_path(account_id, zone_name, record_id))
        return self._call("DELETE", path)
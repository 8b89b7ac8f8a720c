"""Parsing of the event payloads delivered by webhooks."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from ..api import Model, User
from ..registrar import WhoisPrivacy
from ..webhooks import Webhook
from ..zones import Zone, ZoneRecord


@dataclass
class Actor(Model):
    """The entity that triggered an event: a user, support or the system."""

    id: str = ""
    entity: str = ""
    pretty: str = ""


@dataclass(frozen=True)
class Account:
    """The account an event is attached to.

    ``display`` is a label for the account, ``identifier`` a human-readable
    identifier such as its string id or e-mail. ``details`` holds the whole
    account object as it was sent.
    """

    id: int = 0
    display: str = ""
    identifier: str = ""
    details: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Account:
        if not isinstance(data, Mapping):
            raise ValueError("the event account must be a JSON object")
        return cls(
            id=data.get("id") or 0,
            display=data.get("display") or "",
            identifier=data.get("identifier") or "",
            details=dict(data),
        )


class GenericEventData(dict):
    """The data of an event without a dedicated type: a plain mapping."""


@dataclass
class AccountEventData(Model):
    """The data of an account event."""

    account: dict[str, Any] | None = None


@dataclass
class AccountMembershipEventData(Model):
    """The data of an account membership or invitation event."""

    account: dict[str, Any] | None = None
    account_invitation: dict[str, Any] | None = None
    user: User | None = None


@dataclass
class CertificateEventData(Model):
    """The data of a certificate event."""

    certificate: dict[str, Any] | None = None


@dataclass
class ContactEventData(Model):
    """The data of a contact event."""

    contact: dict[str, Any] | None = None


@dataclass
class DNSSECEventData(Model):
    """The data of a DNSSEC event."""

    delegation_signer_record: dict[str, Any] | None = None


@dataclass
class DomainEventData(Model):
    """The data of a domain event."""

    auto: bool = False
    domain: dict[str, Any] | None = None
    registrant: dict[str, Any] | None = None
    delegation: Any = None

    # The delegation arrives under the "name_servers" key.
    @classmethod
    def from_dict(cls, data):
        event_data = super().from_dict(data)
        event_data.delegation = data.get("name_servers")
        return event_data


@dataclass
class DomainTransferLockEventData(Model):
    """The data of a transfer lock enable or disable event."""

    domain: dict[str, Any] | None = None


@dataclass
class DomainRegistrantChangeEventData(Model):
    """The data of a registrant change event."""

    domain: dict[str, Any] | None = None
    registrant: dict[str, Any] | None = None


@dataclass
class EmailForwardEventData(Model):
    """The data of an e-mail forward event."""

    email_forward: dict[str, Any] | None = None


@dataclass
class WebhookEventData(Model):
    """The data of a webhook event."""

    webhook: Webhook | None = None


@dataclass
class WhoisPrivacyEventData(Model):
    """The data of a whois privacy event."""

    domain: dict[str, Any] | None = None
    whois_privacy: WhoisPrivacy | None = None


@dataclass
class ZoneEventData(Model):
    """The data of a zone event."""

    zone: Zone | None = None


@dataclass
class ZoneRecordEventData(Model):
    """The data of a zone record event."""

    zone_record: ZoneRecord | None = None


EventData = Union[
    GenericEventData,
    AccountEventData,
    AccountMembershipEventData,
    CertificateEventData,
    ContactEventData,
    DNSSECEventData,
    DomainEventData,
    DomainTransferLockEventData,
    DomainRegistrantChangeEventData,
    EmailForwardEventData,
    WebhookEventData,
    WhoisPrivacyEventData,
    ZoneEventData,
    ZoneRecordEventData,
]

_EVENT_GROUPS: dict[type, tuple[str, ...]] = {
    AccountEventData: ("account.billing_settings_update", "account.update"),
    AccountMembershipEventData: (
        "account.user_invitation_accept",
        "account.user_invitation_revoke",
        "account.user_invite",
        "account.user_remove",
    ),
    CertificateEventData: ("certificate.issue", "certificate.remove_private_key"),
    ContactEventData: ("contact.create", "contact.delete", "contact.update"),
    DNSSECEventData: (
        "dnssec.create",
        "dnssec.delete",
        "dnssec.rotation_complete",
        "dnssec.rotation_start",
    ),
    DomainEventData: (
        "domain.auto_renewal_disable",
        "domain.auto_renewal_enable",
        "domain.create",
        "domain.delegation_change",
        "domain.delete",
        "domain.register",
        "domain.registrant_change",
        "domain.registrant_change:started",
        "domain.registrant_change:cancelled",
        "domain.renew",
        "domain.resolution_disable",
        "domain.resolution_enable",
        "domain.transfer",
    ),
    DomainTransferLockEventData: ("domain.transfer_lock_enable", "domain.transfer_lock_disable"),
    EmailForwardEventData: ("email_forward.create", "email_forward.delete", "email_forward.update"),
    WebhookEventData: ("webhook.create", "webhook.delete"),
    WhoisPrivacyEventData: (
        "whois_privacy.disable",
        "whois_privacy.enable",
        "whois_privacy.purchase",
        "whois_privacy.renew",
    ),
    ZoneEventData: ("zone.create", "zone.delete"),
    ZoneRecordEventData: ("zone_record.create", "zone_record.delete", "zone_record.update"),
}

EVENT_DATA_TYPES: dict[str, type] = {
    name: data_type for data_type, names in _EVENT_GROUPS.items() for name in names
}


@dataclass
class Event:
    """A webhook event with its typed data and the payload it came from."""

    name: str = ""
    api_version: str = ""
    request_id: str = ""
    actor: Actor | None = None
    account: Account | None = None
    data: Any = None
    payload: bytes = field(default=b"", repr=False)


def _load_data(data_type: type, raw: Any) -> Any:
    if raw is None:
        return data_type()
    if not isinstance(raw, Mapping):
        raise ValueError("the event data must be a JSON object")
    if data_type is GenericEventData:
        return GenericEventData(raw)
    try:
        return data_type.from_dict(raw)
    except TypeError as error:
        raise ValueError(f"invalid event data: {error}") from error


def parse_event(payload: bytes | str) -> Event:
    """Parse a webhook payload into an Event.

    The data is given the type that matches the event name, or
    GenericEventData when no type matches. Raises ValueError on a payload
    that is not a valid event.
    """
    raw_payload = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)
    document = json.loads(raw_payload)
    if not isinstance(document, dict):
        raise ValueError("the event payload must be a JSON object")

    raw_actor = document.get("actor")
    if raw_actor is not None and not isinstance(raw_actor, Mapping):
        raise ValueError("the event actor must be a JSON object")
    raw_account = document.get("account")

    name = document.get("name") or ""
    data_type = EVENT_DATA_TYPES.get(name, GenericEventData)

    return Event(
        name=name,
        api_version=document.get("api_version") or "",
        request_id=document.get("request_identifier") or "",
        actor=Actor.from_dict(raw_actor) if raw_actor is not None else None,
        account=Account.from_dict(raw_account) if raw_account is not None else None,
        data=_load_data(data_type, document.get("data")),
        payload=raw_payload,
    )
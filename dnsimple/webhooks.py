"""Webhooks registered on an account."""

from __future__ import annotations

from dataclasses import dataclass

from .api import BaseService, ListOptions, Model, Response, versioned


@dataclass
class Webhook(Model):
    """A webhook."""

    id: int = 0
    url: str = ""


def webhook_path(account_id, webhook_id=0) -> str:
    path = f"/{account_id}/webhooks"
    if webhook_id:
        path += f"/{webhook_id}"
    return path


class WebhooksService(BaseService):
    """Calls for webhooks."""

    def list_webhooks(self, account_id, options: ListOptions | None = None) -> Response[list[Webhook]]:
        """List the webhooks; the API does not page them, so options are ignored."""
        return self._call("GET", versioned(webhook_path(account_id, 0)), model=Webhook, many=True)

    def create_webhook(self, account_id, webhook_attributes: Webhook) -> Response[Webhook]:
        path = versioned(webhook_path(account_id, 0))
        return self._call("POST", path, webhook_attributes, model=Webhook)

    def get_webhook(self, account_id, webhook_id) -> Response[Webhook]:
        return self._call("GET", versioned(webhook_path(account_id, webhook_id)), model=Webhook)

    def delete_webhook(self, account_id, webhook_id) -> Response[Webhook]:
        """Permanently delete the webhook."""
        return self._call("DELETE", versioned(webhook_path(account_id, webhook_id)))
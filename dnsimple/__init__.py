"""Client for part of the DNSimple v2 API, with webhook event parsing."""

__version__ = "4.0.0"

__all__ = [
    "api",
    "services",
    "templates",
    "tlds",
    "registrar",
    "vanity",
    "webhooks",
    "zones",
    "webhook",
]
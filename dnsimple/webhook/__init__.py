"""Parsing of the event payloads DNSimple sends to webhooks."""

__all__ = ["events"]
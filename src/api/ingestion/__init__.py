"""Ingestion bounded context.

Accepts telemetry messages about users and persists them: the user is
upserted and the message appended inside one transaction.
"""

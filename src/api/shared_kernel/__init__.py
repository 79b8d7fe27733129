"""Shared Kernel module.

Access control primitives (bearer token, client allowlist), the observation
context used by every probe, and the HTTP middleware applied to all routes.
Bounded contexts may depend on this package; it depends on none of them.
"""

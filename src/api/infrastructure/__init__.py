"""Shared infrastructure: settings, logging, persistence and HTTP wiring."""

"""Shared utilities: datetime helpers, request context, and telemetry.

Used by domain, application, and infrastructure. No business logic.
"""

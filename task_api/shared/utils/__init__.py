"""Shared helpers (datetime)."""

from task_api.shared.utils.datetime import ensure_utc, utc_now

__all__ = ["ensure_utc", "utc_now"]

"""Shared domain components used across domain boundaries."""

from voicehub.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "ensure_tz_aware",
    "utc_now",
]

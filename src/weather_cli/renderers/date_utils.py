"""Shared time and place formatting helpers for renderers."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta


def format_sun_time(epoch_seconds: int, utc_offset_seconds: int) -> str:
    """Local ``HH:MM`` (24h) for a UTC epoch at a fixed UTC offset.

    ``format_sun_time(0, 3600)`` -> ``01:00``; negative offsets wrap to the
    previous day, e.g. ``format_sun_time(0, -3600)`` -> ``23:00``.
    """
    local = datetime.fromtimestamp(epoch_seconds, tz=UTC) + timedelta(seconds=utc_offset_seconds)
    return local.strftime("%H:%M")


def format_utc_offset(utc_offset_seconds: int) -> str:
    """Label such as ``UTC+1``, ``UTC-5`` or ``UTC+5:30``."""
    sign = "-" if utc_offset_seconds < 0 else "+"
    hours, remainder = divmod(abs(utc_offset_seconds), 3600)
    minutes = remainder // 60
    if minutes:
        return f"UTC{sign}{hours}:{minutes:02d}"
    return f"UTC{sign}{hours}"


def format_coordinates(latitude: float, longitude: float) -> str:
    """Hemisphere-suffixed coordinates, e.g. ``51.509\u00b0N, 0.126\u00b0W``."""
    lat_hemi = "S" if latitude < 0 else "N"
    lon_hemi = "W" if longitude < 0 else "E"
    return f"{abs(latitude):.3f}\u00b0{lat_hemi}, {abs(longitude):.3f}\u00b0{lon_hemi}"


def format_updated(now: datetime) -> str:
    """Render timestamp, ``YYYY-MM-DD HH:MM:SS UTC``. Naive datetimes are taken as UTC."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return now.astimezone(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")


def utc_now() -> datetime:
    return datetime.now(UTC)

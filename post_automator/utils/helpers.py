"""Shared helpers."""


def media_type(content_type: str | None) -> str:
    """Return the bare media type of a Content-Type header ('' if missing)."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def safe_decode(raw: bytes | str | None) -> str | None:
    """Decode UTF-8 bytes (BOM tolerated). Return None if undecodable or empty."""
    if raw is None:
        return None
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return None


def blank_to_none(value: str | None) -> str | None:
    """Treat whitespace-only strings as absent."""
    if value is None or not value.strip():
        return None
    return value

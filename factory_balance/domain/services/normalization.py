"""Domain normalization helpers."""


def normalize_kind(kind: str | None) -> str | None:
    """Normalize account or party type values.

    Args:
        kind: Raw type value from a repository.

    Returns:
        str | None: Lower-cased type value, or None when blank.
    """
    if not kind:
        return None
    cleaned = kind.strip()
    return cleaned.lower() if cleaned else None


def normalize_name(name: str | None) -> str:
    """Normalize display names, mapping missing names to an empty string."""
    if not name:
        return ""
    return name.strip()


__all__ = ["normalize_kind", "normalize_name"]

"""Platform name normalization."""

from typing import Any, Optional

from .config import PLATFORMS


def normalize_platform(platform: Any) -> Optional[str]:
    """Convert a platform to its short code.

    Args:
        platform: A short code ('euw') or full name ('Europe_West')

    Returns:
        The short code if `platform` is known, None otherwise
    """
    for short, _ in PLATFORMS:
        if platform == short:
            return platform

    for short, full in PLATFORMS:
        if platform == full:
            return short

    return None


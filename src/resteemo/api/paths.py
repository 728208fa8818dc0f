"""Request path construction for the captainteemo API.

The API exposes three path shapes:

    /player/{platform}/{summoner}{/section}{season}
    /team/{platform}{/section}/{tag or guid}[/leagues]
    /service-state/{platform}{/section}

Values are spliced in verbatim, the remote grammar expects them unencoded.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .errors import InvalidPlatformError
from .platforms import normalize_platform


@dataclass(frozen=True)
class RequestIntent:
    """Arguments of a single API call, before path construction.

    Attributes:
        platform: Platform as given by the caller (short or full form)
        path: Section appended after the lookup target, if any
        summoner: Summoner name, selects the player form
        tag: Team tag, selects the team form
        guid: Team GUID, selects the team form with a /leagues suffix
        season: Appended raw after the section in the player form
    """

    platform: Any
    path: Optional[str] = None
    summoner: Any = None
    tag: Any = None
    guid: Any = None
    season: Any = None


def build_path(intent: RequestIntent) -> str:
    """Build the API path for `intent`.

    Args:
        intent: The request to build a path for

    Returns:
        Path relative to the API origin, starting with '/'

    Raises:
        InvalidPlatformError: If the platform cannot be normalized
    """
    short_platform = normalize_platform(intent.platform)
    if short_platform is None:
        raise InvalidPlatformError(intent.platform)

    sub_path = '' if intent.path is None else f"/{intent.path}"

    if intent.summoner:
        season = intent.season or ''
        return f"/player/{short_platform}/{intent.summoner}{sub_path}{season}"

    if intent.tag or intent.guid:
        target = intent.tag or intent.guid
        suffix = '/leagues' if intent.guid else ''
        return f"/team/{short_platform}{sub_path}/{target}{suffix}"

    return f"/service-state/{short_platform}{sub_path}"

"""captainteemo API client for League of Legends statistics.

This module provides the request dispatcher and the public set of lookups.
Every lookup takes a trailing ``callback(error, response)`` that is invoked
exactly once: with the validated response on success, or with the error
that ended the call.
"""

import logging
from typing import Any, Callable, Optional

import requests

from .config import ENDPOINT, Config, build_headers
from .errors import MissingCallbackError, MissingConfigError, TeemoAPIError
from .paths import RequestIntent, build_path
from .responses import validate_response

Callback = Callable[[Optional[BaseException], Any], Any]


class TeemoAPIClient:
    """Client for the captainteemo API.

    The user agent string is captured once at construction and sent with
    every request. The client holds no other state, so one instance may be
    shared between concurrent callers.

    Attributes:
        referer_string (str): Contact string sent as the User-Agent header
        endpoint (str): API origin request paths are appended to
        headers (dict): Headers sent with every request
        session (requests.Session): HTTP session for requests
        player (PlayerEndpoints): Summoner lookups
        team (TeamEndpoints): Team lookups
    """

    def __init__(self, referer_string: str, endpoint: Optional[str] = None,
                 session: Optional[requests.Session] = None) -> None:
        """Initialize the client.

        Args:
            referer_string: Contact string used as the User-Agent header
            endpoint: API origin (defaults to ENDPOINT)
            session: HTTP session to send requests through

        Raises:
            MissingConfigError: If `referer_string` is not a string
        """
        if not isinstance(referer_string, str):
            raise MissingConfigError("`refererString` not defined")

        self.referer_string = referer_string
        self.endpoint = endpoint or ENDPOINT
        self.headers = build_headers(referer_string)
        self.session = session or requests.Session()
        self.logger = logging.getLogger(__name__)

        self.player = PlayerEndpoints(self)
        self.team = TeamEndpoints(self)

        self.logger.debug(f"captainteemo client initialized for {self.endpoint}")

    @classmethod
    def from_config(cls, config: Config) -> 'TeemoAPIClient':
        """Create a client from a loaded Config."""
        return cls(config.user_agent, endpoint=config.endpoint)

    def _dispatch(self, method: str, path: str, callback: Callback) -> Any:
        """
        Send a request and hand the outcome to `callback`.

        Args:
            method: The HTTP verb
            path: The path to query, relative to the endpoint
            callback: Invoked once as callback(error, response)

        Returns:
            Whatever `callback` returns
        """
        url = f"{self.endpoint}{path}"
        self.logger.debug(f"{method} {url}")

        error = None
        try:
            response = self.session.request(method, url, headers=self.headers)
        except requests.RequestException as e:
            self.logger.warning(f"Network error for {path}: {e}")
            error = e
        if error is not None:
            return callback(error, None)

        self.logger.debug(f"HTTP {response.status_code} for {path}")

        try:
            data = validate_response(response.content)
        except TeemoAPIError as e:
            self.logger.warning(f"Request to {path} failed: {e}")
            error = e
        if error is not None:
            return callback(error, None)

        return callback(None, data)

    def _get(self, path: str, callback: Callback) -> Any:
        return self._dispatch('GET', path, callback)

    def _request(self, intent: RequestIntent, callback: Optional[Callback]) -> Any:
        """
        Build the path for `intent` and send it.

        Args:
            intent: The lookup to perform
            callback: Invoked once as callback(error, response)

        Returns:
            Whatever `callback` returns

        Raises:
            MissingCallbackError: If `callback` is not callable
        """
        if not callable(callback):
            raise MissingCallbackError('missing callback')

        error = None
        try:
            path = build_path(intent)
        except TeemoAPIError as e:
            self.logger.warning(f"Not sending request: {e} ({intent.platform!r})")
            error = e
        if error is not None:
            return callback(error, None)

        return self._get(path, callback)

    def free_week(self, platform: str, callback: Optional[Callback] = None) -> Any:
        """
        Get the free champion rotation for `platform`.

        Args:
            platform: Short code or full platform name
            callback: Used as callback(error, response)
        """
        return self._request(RequestIntent(platform, path='free-week'), callback)

    freeWeek = free_week


class PlayerEndpoints:
    """Summoner lookups. Calling the object itself fetches the profile.

    Summoner names are unique per platform only.
    """

    def __init__(self, client: TeemoAPIClient) -> None:
        self._client = client

    def _lookup(self, platform, summoner, path, callback, season=None):
        intent = RequestIntent(platform, path=path, summoner=summoner, season=season)
        return self._client._request(intent, callback)

    def __call__(self, platform: str, summoner: str, callback: Optional[Callback] = None) -> Any:
        """Get primarily ID based profile data for `summoner`."""
        return self._lookup(platform, summoner, None, callback)

    def ingame(self, platform: str, summoner: str, callback: Optional[Callback] = None) -> Any:
        """Get observer metadata if `summoner` is currently in a game."""
        return self._lookup(platform, summoner, 'ingame', callback)

    def recent_games(self, platform: str, summoner: str, callback: Optional[Callback] = None) -> Any:
        """Get the last 10 matches of `summoner`, in no particular order."""
        return self._lookup(platform, summoner, 'recent_games', callback)

    def influence_points(self, platform: str, summoner: str, callback: Optional[Callback] = None) -> Any:
        """Get lifetime influence point gains."""
        return self._lookup(platform, summoner, 'influence_points', callback)

    def runes(self, platform: str, summoner: str, callback: Optional[Callback] = None) -> Any:
        return self._lookup(platform, summoner, 'runes', callback)

    def mastery(self, platform: str, summoner: str, callback: Optional[Callback] = None) -> Any:
        return self._lookup(platform, summoner, 'mastery', callback)

    def leagues(self, platform: str, summoner: str, callback: Optional[Callback] = None) -> Any:
        return self._lookup(platform, summoner, 'leagues', callback)

    def honor(self, platform: str, summoner: str, callback: Optional[Callback] = None) -> Any:
        return self._lookup(platform, summoner, 'honor', callback)

    def ranked_stats(self, platform: str, summoner: str, season: Any,
                     callback: Optional[Callback] = None) -> Any:
        """
        Get ranked stats for `summoner` in `season`.

        Args:
            platform: Short code or full platform name
            summoner: Summoner name
            season: Season number, appended to the path as given
            callback: Used as callback(error, response)
        """
        return self._lookup(platform, summoner, 'ranked_stats/season/', callback, season=season)

    def teams(self, platform: str, summoner: str, callback: Optional[Callback] = None) -> Any:
        """Get all teams `summoner` is a member of, with their match history."""
        return self._lookup(platform, summoner, 'teams', callback)

    recentGames = recent_games
    influencePoints = influence_points
    rankedStats = ranked_stats


class TeamEndpoints:
    """Team lookups. Calling the object itself looks a team up by tag."""

    def __init__(self, client: TeemoAPIClient) -> None:
        self._client = client

    def __call__(self, platform: str, tag: str, callback: Optional[Callback] = None) -> Any:
        """Get team information and matches for the team tagged `tag`."""
        return self._client._request(RequestIntent(platform, path='tag', tag=tag), callback)

    def leagues(self, platform: str, guid: str, callback: Optional[Callback] = None) -> Any:
        """Get leagues for the team with GUID `guid`."""
        return self._client._request(RequestIntent(platform, path='guid', guid=guid), callback)


def create_client(referer_string: str, endpoint: Optional[str] = None) -> TeemoAPIClient:
    """
    Create a client that identifies itself with `referer_string`.

    Args:
        referer_string: Contact string used as the User-Agent header
        endpoint: API origin (defaults to ENDPOINT)

    Returns:
        A ready to use TeemoAPIClient

    Raises:
        MissingConfigError: If `referer_string` is not a string
    """
    return TeemoAPIClient(referer_string, endpoint=endpoint)

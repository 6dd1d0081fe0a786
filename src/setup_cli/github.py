# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Release listing backed by the GitHub REST API."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

import requests
from pydantic import ValidationError

from . import __version__
from .config import DEFAULT_API_URL, DEFAULT_TIMEOUT_SECONDS
from .errors import ReleaseLookupError
from .models import Release

ACCEPT_HEADER: Final[str] = "application/vnd.github+json"
API_VERSION: Final[str] = "2022-11-28"


class GitHubReleaseSource:
    """List repository releases with a single ``GET /repos/{owner}/{repo}/releases`` call.

    Only the first page is requested; the API returns releases newest first
    and that order is preserved.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        self._headers = {
            "Accept": ACCEPT_HEADER,
            "User-Agent": f"setup-cli/{__version__}",
            "X-GitHub-Api-Version": API_VERSION,
        }
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    def releases_url(self, owner: str, repo: str) -> str:
        return f"{self._api_url}/repos/{owner}/{repo}/releases"

    def list_releases(self, owner: str, repo: str) -> Sequence[Release]:
        """Return the releases of ``owner/repo`` in API order.

        Raises:
            ReleaseLookupError: If the request fails or the payload is not a
                list of release objects.
        """

        url = self.releases_url(owner, repo)
        try:
            response = self._session.get(url, headers=self._headers, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise ReleaseLookupError(f"Failed to list releases for {owner}/{repo}: {exc}") from exc
        except ValueError as exc:
            raise ReleaseLookupError(f"Release listing for {owner}/{repo} was not valid JSON") from exc

        if not isinstance(payload, list):
            raise ReleaseLookupError(f"Unexpected release listing payload for {owner}/{repo}")
        try:
            return [Release.from_api(entry) for entry in payload]
        except ValidationError as exc:
            raise ReleaseLookupError(f"Malformed release entry for {owner}/{repo}: {exc}") from exc


__all__ = ["ACCEPT_HEADER", "GitHubReleaseSource"]

"""
Downloads resolved entries over HTTP.

Standard HTTP redirects are followed by aiohttp. On top of that, esm.sh
answers with an `X-Esm-Id` header naming the final build path of a module;
when present, that path is resolved against the provider and fetched
exactly once more.
"""

import asyncio
import logging
from urllib.parse import urljoin

import aiohttp

from vendurl.exceptions import FetchError
from vendurl.models.manifest import ResolvedEntry

log = logging.getLogger(__name__)

FINAL_PATH_HEADER = "X-Esm-Id"


class Fetcher:
    """Fetches file contents for resolved entries using one shared session."""

    def __init__(self, session: aiohttp.ClientSession | None = None):
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "Fetcher":
        if self._session is None:
            self._session = self._create_session()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def _create_session(self) -> aiohttp.ClientSession:
        # No overall timeout: a slow CDN build is waited on for as long as it takes.
        return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=None))

    async def close(self) -> None:
        """Closes the session if this fetcher created it."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()
            self._session = None
            log.debug("Fetcher session closed.")

    async def fetch(self, entry: ResolvedEntry, on_redirect=None) -> str:
        """
        Downloads the text body for `entry`.

        If the first response names a final path, `entry.url` is replaced
        with the redirected URL and `on_redirect` (if given) is called with it.

        Raises:
            FetchError: On a non-200 status, any network-level failure, or a
            URL the HTTP client cannot request.
        """
        if self._session is None:
            raise RuntimeError("Fetcher must be used as an async context manager.")

        try:
            async with self._session.get(entry.url) as response:
                self._check_status(entry, response)
                final_path = response.headers.get(FINAL_PATH_HEADER)
                if not final_path:
                    return await response.text(errors="replace")

            entry.url = urljoin(entry.provider, final_path)
            log.debug(
                f"'{entry.filename}' redirected by {FINAL_PATH_HEADER} to {entry.url}"
            )
            if on_redirect:
                on_redirect(entry.url)

            async with self._session.get(entry.url) as response:
                self._check_status(entry, response)
                return await response.text(errors="replace")

        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise FetchError(
                f'Unable to download "{entry.filename}" from {entry.url}: {e}'
            ) from e

    @staticmethod
    def _check_status(entry: ResolvedEntry, response: aiohttp.ClientResponse) -> None:
        if response.status != 200:
            raise FetchError(
                f'Unable to fetch "{entry.specifier}" from constructed URL: '
                f"{entry.url} (HTTP {response.status})"
            )

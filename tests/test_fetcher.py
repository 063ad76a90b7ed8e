"""Tests for the HTTP fetcher and its X-Esm-Id redirect handling."""

from pathlib import Path
from unittest.mock import MagicMock

import aiohttp
import pytest
from conftest import FakeResponse, FakeSession

from vendurl.exceptions import FetchError
from vendurl.models.manifest import ResolvedEntry
from vendurl.web.fetcher import FINAL_PATH_HEADER, Fetcher


def make_entry(url: str, provider: str = "https://esm.sh/") -> ResolvedEntry:
    return ResolvedEntry(
        filename="a.js",
        specifier="a",
        url=url,
        destination=Path("vendor"),
        provider=provider,
    )


class TestFetcher:
    """Test fetching resolved entries."""

    @pytest.mark.asyncio
    async def test_plain_fetch_returns_body(self) -> None:
        session = FakeSession({"https://example.com/a.js": FakeResponse(body="X")})
        entry = make_entry("https://example.com/a.js")

        async with Fetcher(session) as fetcher:
            body = await fetcher.fetch(entry)

        assert body == "X"
        assert session.requested == ["https://example.com/a.js"]
        assert entry.url == "https://example.com/a.js"

    @pytest.mark.asyncio
    async def test_final_path_header_triggers_one_more_request(self) -> None:
        session = FakeSession(
            {
                "https://esm.sh/a?bundle=true": FakeResponse(
                    body="stub",
                    headers={FINAL_PATH_HEADER: "v135/a@1.0.0/es2022/a.bundle.mjs"},
                ),
                "https://esm.sh/v135/a@1.0.0/es2022/a.bundle.mjs": FakeResponse(
                    body="final",
                    headers={FINAL_PATH_HEADER: "should/not/be/followed.mjs"},
                ),
            }
        )
        entry = make_entry("https://esm.sh/a?bundle=true")
        on_redirect = MagicMock()

        async with Fetcher(session) as fetcher:
            body = await fetcher.fetch(entry, on_redirect=on_redirect)

        assert body == "final"
        assert entry.url == "https://esm.sh/v135/a@1.0.0/es2022/a.bundle.mjs"
        assert len(session.requested) == 2
        on_redirect.assert_called_once_with(entry.url)

    @pytest.mark.asyncio
    async def test_final_path_is_resolved_against_entry_provider(self) -> None:
        session = FakeSession(
            {
                "https://cdn.test/a": FakeResponse(headers={"x-esm-id": "/stable/a.js"}),
                "https://cdn.test/stable/a.js": FakeResponse(body="ok"),
            }
        )
        entry = make_entry("https://cdn.test/a", provider="https://cdn.test/")

        async with Fetcher(session) as fetcher:
            assert await fetcher.fetch(entry) == "ok"

    @pytest.mark.asyncio
    async def test_non_200_status_raises(self) -> None:
        session = FakeSession({"https://esm.sh/a": FakeResponse(status=404, body="nope")})
        entry = make_entry("https://esm.sh/a")

        async with Fetcher(session) as fetcher:
            with pytest.raises(FetchError, match="HTTP 404"):
                await fetcher.fetch(entry)

    @pytest.mark.asyncio
    async def test_non_200_on_redirect_raises(self) -> None:
        session = FakeSession(
            {
                "https://esm.sh/a": FakeResponse(headers={FINAL_PATH_HEADER: "gone.js"}),
                "https://esm.sh/gone.js": FakeResponse(status=500),
            }
        )

        async with Fetcher(session) as fetcher:
            with pytest.raises(FetchError, match="HTTP 500"):
                await fetcher.fetch(make_entry("https://esm.sh/a"))

    @pytest.mark.asyncio
    async def test_network_error_becomes_fetch_error(self) -> None:
        session = FakeSession(
            {"https://esm.sh/a": aiohttp.ClientConnectionError("connection refused")}
        )

        async with Fetcher(session) as fetcher:
            with pytest.raises(FetchError, match="connection refused"):
                await fetcher.fetch(make_entry("https://esm.sh/a"))

    @pytest.mark.asyncio
    async def test_injected_session_is_not_closed(self) -> None:
        session = FakeSession({})

        async with Fetcher(session):
            pass

        assert session.closed is False

    @pytest.mark.asyncio
    async def test_fetch_outside_context_is_an_error(self) -> None:
        with pytest.raises(RuntimeError):
            await Fetcher().fetch(make_entry("https://esm.sh/a"))

    @pytest.mark.asyncio
    async def test_undecodable_body_is_replaced_not_raised(self) -> None:
        session = FakeSession(
            {"https://example.com/bin.js": FakeResponse(body=b"\xff\xfe bad")}
        )

        async with Fetcher(session) as fetcher:
            body = await fetcher.fetch(make_entry("https://example.com/bin.js"))

        assert body == "\ufffd\ufffd bad"

    @pytest.mark.asyncio
    async def test_unrequestable_url_becomes_fetch_error(self) -> None:
        session = FakeSession({"npm:react": aiohttp.InvalidURL("npm:react")})

        async with Fetcher(session) as fetcher:
            with pytest.raises(FetchError, match="npm:react"):
                await fetcher.fetch(make_entry("npm:react"))

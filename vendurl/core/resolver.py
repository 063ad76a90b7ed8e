"""
Turns manifest specifiers into absolute download URLs.

A specifier is either a string or an object carrying its own `specifier`
plus optional `provider`, `bundle` and `destination` overrides. Strings
that are already absolute URLs are used as-is; anything else is resolved
against the provider, with `bundle=true` added when bundling is enabled.
"""

import logging
from pathlib import Path
from typing import Any
from urllib.parse import parse_qsl, urlencode, urljoin, urlsplit, urlunsplit

from pydantic import ValidationError

from vendurl.exceptions import (
    ConfigurationError,
    SpecifierResolutionError,
    UnsupportedSpecifierError,
)
from vendurl.models.config import SpecifierOverride, VendorConfig
from vendurl.models.manifest import ResolutionFailure, ResolutionResult, ResolvedEntry
from vendurl.utils.path import resolve_destination

log = logging.getLogger(__name__)

# Schemes that only form a usable URL together with a host.
_HOST_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})


def parse_absolute_url(value: str) -> str | None:
    """
    Returns `value` unchanged if it is an absolute URL, otherwise None.

    Any string with a scheme counts (`npm:react`, `data:...`), except that
    web schemes such as `https:` also need a host.
    """
    try:
        parts = urlsplit(value)
    except ValueError:
        return None
    if not parts.scheme:
        return None
    if parts.scheme in _HOST_SCHEMES and not parts.netloc:
        return None
    return value


def resolve_against_provider(specifier: str, provider: str, bundle: bool) -> str:
    """
    Resolves a relative specifier against a provider base URL.

    Raises:
        SpecifierResolutionError: If no absolute URL can be built.
    """
    if parse_absolute_url(provider) is None:
        raise SpecifierResolutionError(
            f'Unable to parse "{specifier}" to URL: provider "{provider}" '
            "is not an absolute URL."
        )

    try:
        parts = urlsplit(urljoin(provider, specifier))
    except ValueError as e:
        raise SpecifierResolutionError(
            f'Unable to parse "{specifier}" to URL: {e}'
        ) from e

    if not (parts.scheme and parts.netloc):
        raise SpecifierResolutionError(f'Unable to parse "{specifier}" to URL')

    if bundle:
        query = [
            (key, value)
            for key, value in parse_qsl(parts.query, keep_blank_values=True)
            if key != "bundle"
        ]
        query.append(("bundle", "true"))
        parts = parts._replace(query=urlencode(query))

    return urlunsplit(parts)


def resolve_url(specifier: str, provider: str, bundle: bool) -> str:
    """Resolves a specifier string to an absolute URL."""
    if (url := parse_absolute_url(specifier)) is not None:
        return url
    return resolve_against_provider(specifier, provider, bundle)


class ManifestResolver:
    """Resolves every entry of a manifest using the configured defaults."""

    def __init__(self, config: VendorConfig, project_dir: Path):
        self.config = config
        self.project_dir = project_dir

    def resolve_all(self) -> ResolutionResult:
        """
        Resolves all packages in manifest order.

        Entries with an unsupported specifier shape are recorded as failures
        and left out of the result. A specifier string that cannot be turned
        into a URL raises and stops the whole run.
        """
        entries: list[ResolvedEntry] = []
        failures: list[ResolutionFailure] = []

        for filename, specifier in self.config.packages.items():
            try:
                entry = self.resolve_entry(filename, specifier)
            except UnsupportedSpecifierError as e:
                log.debug(f"Skipping '{filename}': {e}")
                failures.append(ResolutionFailure(filename=filename, reason=str(e)))
                continue
            entries.append(entry)

        return ResolutionResult(entries=entries, failures=failures)

    def resolve_entry(self, filename: str, specifier: Any) -> ResolvedEntry:
        """Resolves a single manifest entry."""
        if isinstance(specifier, str):
            override = SpecifierOverride.model_construct(specifier=specifier.strip())
        elif isinstance(specifier, dict):
            override = self._parse_override(filename, specifier)
        else:
            raise UnsupportedSpecifierError(
                f'Unsupported specifier for "{filename}": expected a string or '
                f"an object, got {type(specifier).__name__}."
            )

        provider = override.provider or self.config.provider
        bundle = self.config.bundle if override.bundle is None else override.bundle
        destination = override.destination or self.config.destination
        try:
            destination_path = resolve_destination(self.project_dir, destination)
        except ValueError as e:
            if override.destination:
                raise UnsupportedSpecifierError(
                    f'Invalid destination for "{filename}": {e}'
                ) from e
            raise ConfigurationError(str(e)) from e

        url = resolve_url(override.specifier, provider, bundle)
        log.debug(f"Resolved '{filename}' -> {url}")

        return ResolvedEntry(
            filename=filename,
            specifier=override.specifier,
            url=url,
            destination=destination_path,
            provider=provider,
        )

    def _parse_override(
        self, filename: str, specifier: dict[str, Any]
    ) -> SpecifierOverride:
        try:
            return SpecifierOverride.model_validate(specifier)
        except ValidationError as e:
            raise UnsupportedSpecifierError(
                f'Invalid specifier object for "{filename}": {e}'
            ) from e

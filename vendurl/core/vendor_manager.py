"""
The main orchestrator for a vendoring run: resolve, clean, fetch and write.
"""

import logging
import os
from pathlib import Path

from vendurl.cli.reporter import Reporter
from vendurl.exceptions import ConfigurationError, FetchError, UserAbort, WriteError
from vendurl.models.config import VendorConfig
from vendurl.models.manifest import ResolvedEntry
from vendurl.models.options import RunOptions
from vendurl.models.stats import VendorStats
from vendurl.storage.writer import VendorWriter
from vendurl.utils.formatting import format_size
from vendurl.utils.path import resolve_destination
from vendurl.web.fetcher import Fetcher

from .resolver import ManifestResolver

log = logging.getLogger(__name__)


class VendorManager:
    """Orchestrates one vendoring run over every entry of the manifest."""

    def __init__(
        self,
        config: VendorConfig,
        options: RunOptions,
        reporter: Reporter,
        project_dir: Path,
        fetcher: Fetcher | None = None,
        writer: VendorWriter | None = None,
    ):
        self.config = config
        self.options = options
        self.reporter = reporter
        self.project_dir = project_dir
        try:
            self.destination = resolve_destination(project_dir, config.destination)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        self.resolver = ManifestResolver(config, project_dir)
        self.fetcher = fetcher or Fetcher()
        self.writer = writer or VendorWriter()
        self.stats = VendorStats()

    async def execute(self) -> VendorStats:
        """
        Runs the whole vendoring process.

        Every entry is resolved before anything touches the filesystem or the
        network, so a malformed specifier aborts the run with nothing changed.
        Fetch and write failures only affect their own entry.

        Raises:
            SpecifierResolutionError: If a specifier string cannot be parsed.
            UserAbort: If the user declines the clean confirmation.
            WriteError: If the destination directory cannot be created.
        """
        resolution = self.resolver.resolve_all()

        if self.options.clean:
            self._clean()

        await self.writer.ensure_directory(self.destination)

        for failure in resolution.failures:
            self.reporter.error(failure.reason)
            self.stats.record_failure(failure.filename)

        async with self.fetcher:
            for entry in resolution.entries:
                await self._vend_entry(entry)

        log.debug(
            f"Run finished: {self.stats.files_vendored} vendored, "
            f"{self.stats.files_failed} failed."
        )
        return self.stats

    def _clean(self) -> None:
        """Removes the global destination, asking first unless --yes was given."""
        if Path(os.path.abspath(self.destination)) == Path(
            os.path.abspath(self.project_dir)
        ):
            raise WriteError(
                f'Refusing to clean "{self.destination}": it is the project directory.'
            )

        if not self.options.yes and not self.reporter.confirm(
            f'Remove "{self.destination}" and everything in it?'
        ):
            raise UserAbort("Clean cancelled by user. Nothing was vendored.")

        if self.writer.clean(self.destination):
            self.reporter.info(f'Removed "{self.destination}"')

    async def _vend_entry(self, entry: ResolvedEntry) -> None:
        """Fetches and writes a single entry, recording the outcome."""
        self.reporter.info(f'Creating "{entry.filename}" from "{entry.specifier}"')
        self.reporter.detail(f"Fetching {entry.url}")

        try:
            contents = await self.fetcher.fetch(
                entry,
                on_redirect=lambda url: self.reporter.info(f"Redirecting to {url}"),
            )
        except FetchError as e:
            self.reporter.error(str(e))
            self.stats.record_failure(entry.filename)
            return

        try:
            size = await self.writer.write(entry.destination, entry.filename, contents)
        except WriteError as e:
            self.reporter.error(f'Unable to save "{entry.filename}": {e}')
            self.stats.record_failure(entry.filename)
            return

        self.stats.record_success(size)
        self.reporter.success(f'Saved "{entry.filename}" to {entry.destination}')
        self.reporter.detail(f"{entry.filename}: {format_size(size)}")

"""
Persists fetched contents into the vendor directory.
"""

import asyncio
import logging
import shutil
from pathlib import Path

import aiofiles

from vendurl.exceptions import WriteError
from vendurl.utils.path import create_dir, output_path

log = logging.getLogger(__name__)


class VendorWriter:
    """Creates destination directories and writes vendored files into them."""

    async def ensure_directory(self, directory: Path) -> None:
        """Creates `directory` and its parents if they are missing."""
        try:
            await asyncio.to_thread(create_dir, directory)
        except OSError as e:
            raise WriteError(f'Unable to create "{directory}": {e}') from e

    async def write(self, directory: Path, filename: str, contents: str) -> int:
        """
        Writes `contents` as `filename` inside `directory`, replacing any
        existing file.

        Returns:
            The number of bytes written.

        Raises:
            WriteError: If the filename is unusable or the filesystem rejects
            the write.
        """
        try:
            target = output_path(directory, filename)
        except ValueError as e:
            raise WriteError(str(e)) from e

        await self.ensure_directory(target.parent)

        data = contents.encode("utf-8")
        try:
            async with aiofiles.open(target, "wb") as f:
                await f.write(data)
        except OSError as e:
            raise WriteError(f'Unable to save "{filename}" to {directory}: {e}') from e

        log.debug(f"Wrote {len(data)} bytes to {target}")
        return len(data)

    def clean(self, directory: Path) -> bool:
        """
        Removes `directory` recursively.

        Returns:
            True if something was removed, False if it did not exist.
        """
        if not directory.exists():
            log.debug(f"Nothing to clean at {directory}")
            return False
        try:
            if directory.is_dir() and not directory.is_symlink():
                shutil.rmtree(directory)
            else:
                directory.unlink()
        except OSError as e:
            raise WriteError(f'Unable to remove "{directory}": {e}') from e
        return True

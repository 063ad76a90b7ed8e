"""
Dataclass for tracking vendoring session statistics.
"""

from dataclasses import dataclass, field


@dataclass
class VendorStats:
    """Tracks how many entries were vendored or failed during a run."""

    files_vendored: int = 0
    files_failed: int = 0
    bytes_written: int = 0
    failed_files: list[str] = field(default_factory=list)

    def record_success(self, size: int) -> None:
        self.files_vendored += 1
        self.bytes_written += size

    def record_failure(self, filename: str) -> None:
        self.files_failed += 1
        self.failed_files.append(filename)

    @property
    def succeeded(self) -> bool:
        """True only when no entry failed at any stage."""
        return self.files_failed == 0

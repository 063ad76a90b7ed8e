"""
Data structures produced by resolving the manifest.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ResolvedEntry:
    """A manifest entry whose specifier has been turned into an absolute URL."""

    filename: str
    specifier: str
    url: str
    destination: Path
    provider: str


@dataclass(frozen=True)
class ResolutionFailure:
    """A manifest entry that was skipped because its specifier was unusable."""

    filename: str
    reason: str


@dataclass
class ResolutionResult:
    """The outcome of resolving a whole manifest, in manifest order."""

    entries: list[ResolvedEntry]
    failures: list[ResolutionFailure]

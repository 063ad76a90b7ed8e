"""
Command-line options for a single run.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class RunOptions:
    """Flags parsed once from the command line and passed to each component."""

    clean: bool = False
    yes: bool = False
    verbose: bool = False
    color: bool = True

    @classmethod
    def from_flags(
        cls, clean: bool, yes: bool, verbose: bool, no_color: bool
    ) -> "RunOptions":
        """Builds options, honoring the NO_COLOR environment convention."""
        color = not no_color and not os.environ.get("NO_COLOR")
        return cls(clean=clean, yes=yes, verbose=verbose, color=color)

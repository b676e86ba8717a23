"""CLI package for PogoSearch command orchestration.

Parameter handling lives in ``ui``, command logic in ``commands`` and the
logging/error boundary in ``runner``.
"""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from PogoSearch.cli.runner import CommandRunner
from PogoSearch.cli.ui import cli


def main() -> None:
    """Run PogoSearch CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()

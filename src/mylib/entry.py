"""Console script entry point (``mylib``) with production wiring.

Lives at package level so the composition root can be handed to the adapters
layer without the adapters importing it.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI against ``sys.argv`` with production services."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]

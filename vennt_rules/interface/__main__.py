"""
Print a character's ability report.

Usage:
    python -m vennt_rules.interface --catalog abilities.json --character character.yaml
"""

import argparse
import logging
import sys

from ..config import load_config
from ..state.catalog import CatalogError, load_catalog, load_character
from .report import build_report, console, render_report

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the ability report."""
    parser = argparse.ArgumentParser(description="Vennt ability report")
    parser.add_argument(
        "--character", "-c",
        required=True,
        help="Path to a collected character file (JSON or YAML)",
    )
    parser.add_argument(
        "--catalog",
        help="Path to the ability catalog, used to flag outdated abilities",
    )
    parser.add_argument(
        "--config",
        help="Path to a JSON rules config overriding the defaults",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log rule decisions",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s',
    )

    config = load_config(args.config) if args.config else None

    try:
        character = load_character(args.character)
        catalog = load_catalog(args.catalog) if args.catalog else None
    except CatalogError as e:
        console.print(f"[red]{e}[/red]")
        return 1

    rows = build_report(character, catalog, config)
    console.print(render_report(character, rows))

    usable = sum(1 for row in rows if row.usable)
    logger.info(f"{usable} of {len(rows)} abilities usable now")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command-line preview of the QR code listing."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from qrcode_admin import __version__
from qrcode_admin.models.listing import SORT_OPTIONS
from qrcode_admin.service.listing import ListingState
from qrcode_admin.settings import Settings
from qrcode_admin.storage.fixtures import FixtureError, load_codes
from qrcode_admin.storage.memory_repo import InMemoryResourceStore

logger = logging.getLogger("qrcode_admin.cli")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qrcode-admin",
        description="Print the QR code listing for a YAML collection.",
    )
    parser.add_argument("fixture", help="YAML file with a list of QR codes")
    parser.add_argument("--shop", default=settings.shop, help="shop the codes belong to")
    parser.add_argument("--view", default=None, help="view name to select")
    parser.add_argument("--query", default="", help="case-insensitive title search")
    parser.add_argument(
        "--sort",
        default=settings.default_sort,
        choices=[value for _label, value in SORT_OPTIONS],
    )
    parser.add_argument(
        "--money-spent", nargs=2, type=float, metavar=("MIN", "MAX"), default=None
    )
    parser.add_argument("--tag", default="", help="only codes tagged with this text")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def render(state: ListingState, rows: list) -> str:
    lines = [f"View: {state.views.selected.name}  ({len(rows)} QR codes)"]
    for applied in state.filters.applied_summary():
        lines.append(f"  filter: {applied.label}")
    for code in rows:
        lines.append(
            f"{code.title:<30} {code.product_title or '-':<25} "
            f"{code.created_at:%a %b %d %Y}  {code.scans:>6}"
        )
    return "\n".join(lines)


async def _run(args: argparse.Namespace, settings: Settings) -> int:
    state = ListingState.from_settings(settings)
    if args.view is not None:
        try:
            state.views.select(state.views.names.index(args.view))
        except ValueError:
            logger.error(
                "Unknown view '%s' (available: %s)", args.view, ", ".join(state.views.names)
            )
            return 2
    state.set_query(args.query)
    state.set_sort(args.sort)
    if args.money_spent is not None:
        try:
            state.filters.set_value("moneySpent", tuple(args.money_spent))
        except ValueError as exc:
            logger.error("%s", exc)
            return 2
    state.filters.set_value("taggedWith", args.tag)

    try:
        codes = load_codes(args.fixture, shop=args.shop)
    except (OSError, FixtureError) as exc:
        logger.error("Cannot load %s: %s", args.fixture, exc)
        return 1
    store = InMemoryResourceStore(codes)
    collection = await store.fetch_collection(args.shop)
    print(render(state, state.project(collection)))
    return 0


def main(argv: list[str] | None = None) -> int:
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    args = build_parser(settings).parse_args(argv)
    logger.debug("qrcode-admin v%s (shop=%s)", __version__, args.shop)
    return asyncio.run(_run(args, settings))


if __name__ == "__main__":
    sys.exit(main())

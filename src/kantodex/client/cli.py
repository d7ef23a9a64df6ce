"""Console view of the Pokedex.

Usage:
  kantodex-dex list [--search TEXT] [--status all|seen|unseen|caught] [--type NAME ...]
  kantodex-dex seen NUMBER        (toggle policy)
  kantodex-dex catch NUMBER       (toggle policy)
  kantodex-dex advance NUMBER     (cycle policy)
  kantodex-dex reset
"""

import argparse
import asyncio
import sys

from kantodex.client.api import PokedexClient
from kantodex.client.controller import DexController
from kantodex.client.state import DexState
from kantodex.config import settings
from kantodex.core.filtering import StatusFilter
from kantodex.core.lifecycle import UnsupportedTransition, get_policy
from kantodex.logging import get_logger, setup_logging
from kantodex.utils.formatting import format_dex_card, format_stats_header

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kantodex-dex", description="Kanto Pokedex tracker")
    parser.add_argument(
        "--policy",
        choices=["toggle", "cycle"],
        default=settings.lifecycle_policy,
        help="seen/caught transition policy",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="show the Pokedex")
    list_cmd.add_argument("--search", default="")
    list_cmd.add_argument(
        "--status", choices=[s.value for s in StatusFilter], default=StatusFilter.ALL.value
    )
    list_cmd.add_argument("--type", dest="types", action="append", default=[])

    for name, help_text in (
        ("seen", "toggle seen"),
        ("catch", "toggle caught"),
        ("advance", "step unseen -> seen -> caught -> unseen"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("number", type=int)

    sub.add_parser("reset", help="clear every seen/caught flag")
    return parser


def render(state: DexState) -> str:
    lines = [format_stats_header(state.stats(), settings.dex_size)]
    lines.extend(format_dex_card(record) for record in state.visible())
    return "\n".join(lines)


async def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()

    state = DexState()
    async with PokedexClient() as client:
        controller = DexController(client, state, get_policy(args.policy))

        if not await controller.load():
            return 1

        if args.command == "list":
            state.set_search(args.search)
            state.set_status(args.status)
            for type_name in args.types:
                state.toggle_type(type_name)
        else:
            actions = {
                "seen": controller.toggle_seen,
                "catch": controller.toggle_caught,
                "advance": controller.advance,
            }
            try:
                if args.command == "reset":
                    ok = await controller.reset()
                else:
                    ok = await actions[args.command](args.number)
            except UnsupportedTransition as e:
                logger.error("Action not available", error=str(e))
                return 2
            if not ok:
                return 1

    print(render(state))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()

"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import shutil
import sys
from typing import List, Optional

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings

_BRIGHT_GREEN = "\033[1;92m"
_CYAN = "\033[96m"
_YELLOW = "\033[93m"
_RESET = "\033[0m"
_BOLD = "\033[1m"


def _g(s: str) -> str:
    return f"{_BRIGHT_GREEN}{s}{_RESET}"


def _c(s: str) -> str:
    return f"{_CYAN}{s}{_RESET}"


_LOGO = r"""
   ██████╗██╗  ██╗███████╗███████╗██╗  ██╗██╗
  ██╔════╝██║  ██║██╔════╝██╔════╝██║ ██╔╝██║
  ██║     ███████║█████╗  █████╗  █████╔╝ ██║
  ██║     ██╔══██║██╔══╝  ██╔══╝  ██╔═██╗ ██║
  ╚██████╗██║  ██║███████╗███████╗██║  ██╗██║
   ╚═════╝╚═╝  ╚═╝╚══════╝╚══════╝╚═╝  ╚═╝╚═╝
"""


def _print_logo() -> None:
    cols = shutil.get_terminal_size(fallback=(100, 20)).columns
    div = "═" * min(cols, 57)
    print(_g(div))
    for line in _LOGO.splitlines():
        print(_g(line))
    print(_c(f"  Team {settings.ORGANIZATION_TAG} Leaderboard"))
    print(_g(div))


def _menu() -> None:
    _print_logo()
    from presentation.cli import ClearCacheCommand, LeaderboardCommand

    while True:
        cols = shutil.get_terminal_size(fallback=(96, 20)).columns
        print(f"\n{_g('═' * min(cols, 48))}")
        print(f"  {_BOLD}MAIN MENU{_RESET}")
        print(_g("═" * min(cols, 48)))
        print(f"  {_c('1')}  Show leaderboard")
        print(f"  {_c('2')}  Refresh leaderboard")
        print(f"  {_c('3')}  Clear cache")
        print(f"  {_c('4')}  Exit")
        print(_g("─" * min(cols, 48)))
        choice = input("  Choose: ").strip()

        if choice == "1":
            asyncio.run(LeaderboardCommand().run())
        elif choice == "2":
            asyncio.run(LeaderboardCommand().run(refresh=True))
        elif choice == "3":
            ClearCacheCommand().run()
        elif choice == "4":
            print(f"\n  {_g('Goodbye!')}\n")
            break
        else:
            print(f"  {_YELLOW}Invalid option.{_RESET}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Team leaderboard built from roster and player stats APIs.")
    parser.add_argument("--json", action="store_true", help="print the leaderboard as JSON")
    parser.add_argument("--refresh", action="store_true", help="discard cached lookups before building")
    parser.add_argument("--clear-cache", action="store_true", help="discard cached lookups and exit")
    parser.add_argument("--menu", action="store_true", help="open the interactive menu")
    return parser


def run(args: argparse.Namespace) -> int:
    from presentation.cli import ClearCacheCommand, LeaderboardCommand

    if args.clear_cache:
        ClearCacheCommand().run(confirm=True)
        return 0
    return asyncio.run(LeaderboardCommand().run(refresh=args.refresh, json_out=args.json))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    bootstrap_logging(
        service="leaderboard",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="leaderboard.jsonl",
    )
    try:
        if args.menu or not (args.json or args.refresh or args.clear_cache):
            _menu()
            return 0
        return run(args)
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))

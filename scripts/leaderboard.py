from __future__ import annotations

import asyncio

import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))
from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings
from presentation.cli import LeaderboardCommand


def main() -> int:
    bootstrap_logging(service="leaderboard", level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR, log_file_name="leaderboard.jsonl")
    try:
        return asyncio.run(LeaderboardCommand().run(refresh="--refresh" in sys.argv, json_out="--json" in sys.argv))
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(main())

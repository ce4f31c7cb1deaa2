#!/usr/bin/env python3
"""Run one trendcast analysis and print the report as JSON.

Usage:
  python src/demo_prediction.py AAPL --days 10 --seed 7
  python src/demo_prediction.py BTC --source coingecko --headline "Bitcoin rally extends"

Environment (optional, read from .env):
  GEMINI_API_KEY, USE_GEMINI, GEMINI_MODEL
  TRENDCAST_PRICE_SOURCE, TRENDCAST_SEED, TRENDCAST_DEFAULT_DAYS
  COINGECKO_API_KEY, COINGECKO_BASE_URL
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from dotenv import load_dotenv

from trendcast.core import PredictionConfig, PredictionEngine
from trendcast.data import supported_symbols

REPO_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(dotenv_path=REPO_ROOT / ".env")


def main() -> None:
    parser = argparse.ArgumentParser(description="Short-window trend / risk / confidence report")
    parser.add_argument("symbol", nargs="?", default="AAPL", help="Ticker symbol")
    parser.add_argument("--days", type=int, default=None, help="History window, clamped to 7..14")
    parser.add_argument(
        "--headline",
        action="append",
        default=[],
        help="News headline used for sentiment (repeatable)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for synthetic prices")
    parser.add_argument("--source", choices=["synthetic", "coingecko"], default=None)
    parser.add_argument("--no-gemini", action="store_true", help="Use keyword sentiment and templated narrative")
    parser.add_argument("--list-symbols", action="store_true", help="Print symbols with synthetic base prices")
    args = parser.parse_args()

    if args.list_symbols:
        print("\n".join(supported_symbols()))
        return

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger = logging.getLogger("trendcast")

    config = PredictionConfig()
    if args.seed is not None:
        config.seed = args.seed
    if args.source:
        config.price_source = args.source
    if args.no_gemini:
        config.use_gemini = False

    engine = PredictionEngine.from_config(config, logger)
    report = engine.analyze(args.symbol, days=args.days, headlines=args.headline)
    print(json.dumps(report.to_json(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()

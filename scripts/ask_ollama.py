#!/usr/bin/env python3
"""
Ask the Spicy AI agent once from the command line, bypassing the HTTP API.

Run from project root:

    python scripts/ask_ollama.py "What pH do chili peppers like?"
    python scripts/ask_ollama.py --greet
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# Project root on path so "app" resolves
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from app.services.agent_service import ask_ollama, greet


def main() -> int:
    parser = argparse.ArgumentParser(description="Ask the Spicy AI agent a question.")
    parser.add_argument("question", nargs="?", default=None, help="Question to forward to the agent.")
    parser.add_argument("--greet", action="store_true", help="Print the static greeting and exit.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log the outbound call.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    if args.greet:
        print(greet())
        return 0
    if args.question is None:
        parser.error("a question is required unless --greet is given")
    print(asyncio.run(ask_ollama(args.question)))
    return 0


if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Run the practice-plan API with logging configured.

Usage:
    python scripts/serve.py --port 3001
    python scripts/serve.py --reload
"""

import argparse
import logging
import os

import uvicorn

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the guitar practice planner API.")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address.")
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("PORT", "3001")),
        help="Port to listen on (default: $PORT or 3001).",
    )
    parser.add_argument("--reload", action="store_true", help="Reload on code changes.")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    uvicorn.run("api.main:app", host=args.host, port=args.port, reload=args.reload, log_config=None)


if __name__ == "__main__":
    main()

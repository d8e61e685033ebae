from __future__ import annotations

import argparse
import os

from .resources import KINDS


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the CRUD smoke runner."""
    parser = argparse.ArgumentParser(description="CRUD smoke runner for the placeholder API")
    parser.add_argument("--base-url", default=os.getenv("BASE_URL", "http://127.0.0.1:8000"))
    parser.add_argument(
        "--resource",
        action="append",
        choices=sorted(KINDS),
        dest="resources",
        help="Resource kind to exercise; repeat for several (default: all)",
    )
    parser.add_argument("--health-path", default=None, help="Poll this path until 200 first")
    parser.add_argument("--timeout", type=float, default=20.0, help="Health wait in seconds")
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "INFO"))
    args = parser.parse_args(argv)
    args.resources = args.resources or sorted(KINDS)
    return args

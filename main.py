"""Main entry point for the catch query command line."""
from __future__ import annotations

import sys

from dotenv import load_dotenv

from app.startup import run_cli


def main() -> None:
    """Application entry point."""
    # Environment from .env must be in place before configuration is loaded
    load_dotenv()
    sys.exit(run_cli())


__all__ = ["main"]

if __name__ == "__main__":
    main()

"""App Store Connect CLI entry point.

This module serves as the command-line entry point when run as:
    python -m app_store_connect [args]
"""

from __future__ import annotations

from app_store_connect.cli import main

main()

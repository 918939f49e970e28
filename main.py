#!/usr/bin/env python3
"""Main CLI entry point for exploring a follow network."""

import sys

from follownet.cli import main


if __name__ == "__main__":
    sys.exit(main())

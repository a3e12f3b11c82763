#!/usr/bin/env python3
"""
JSON Formatter - Repair, validate and re-indent JSON from the command line.

Usage:
    python main.py format <json_file> [--template <name>] [--spec <name>] [--fix]
    python main.py specs
    python main.py example

Examples:
    python main.py format data.json --template "4 Space Tab"
    python main.py format broken.json --fix --spec "RFC 4627" -o fixed.json
"""

import sys

from jsonfmt.cli import main


if __name__ == "__main__":
    sys.exit(main())

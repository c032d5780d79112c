#!/usr/bin/env python3
"""
Quick launcher for the demo driver.

Usage:
  python run.py                      # sample fixtures
  python run.py --config demo.yaml   # fixtures and limits from YAML
  python run.py --verbose            # log progress to stderr
"""

import sys

from driver.cli import app


def main():
    app(args=["demo", *sys.argv[1:]], prog_name="run.py")


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
record_pager - main entry point
"""
import sys

from record_pager.cli import main

if __name__ == "__main__":
    sys.exit(main())

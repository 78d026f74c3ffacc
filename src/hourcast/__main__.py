"""
Main entry point for the hourcast application.
"""

import sys

from hourcast.cli import main

if __name__ == "__main__":
    sys.exit(main())

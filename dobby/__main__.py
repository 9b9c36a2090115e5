"""Entry point for dobby when run as a module.

This allows the package to be run with: python -m dobby
"""

import sys

from dobby.cli import main

if __name__ == "__main__":
    sys.exit(main())

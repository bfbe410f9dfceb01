"""
Module execution entry point.

Allows running with: python -m forge_cli
"""

import sys
from forge_cli.main import main

if __name__ == "__main__":
    sys.exit(main())

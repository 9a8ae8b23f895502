"""
symstr CLI entry point.

Usage:
    python -m symstr.cli match "'A' | 'B'" A
    python -m symstr.cli includes "'A' | 'B'" A
    python -m symstr.cli replace "'cat mat flat'" at op
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())

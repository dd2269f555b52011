"""
LAUNDRY OS - Main entry point.
"""

from laundry_os.cli import main

if __name__ == "__main__":
    raise SystemExit(main())

"""
Entrypoint for the real estate analysis.

Same as `python -m reporting.cli` or the `realestate-agent` script.
"""

import sys

from reporting.cli import main

if __name__ == "__main__":
    sys.exit(main())

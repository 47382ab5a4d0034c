"""Main entry point for running calcbot_pkg as a module.

This allows running calcbot with:
    python -m calcbot_pkg
    python -m calcbot_pkg --health-check
    python -m calcbot_pkg -e "2+2"
    python -m calcbot_pkg --message "@calc 2+2"

This is equivalent to running:
    python -m calcbot_pkg.cli
    calcbot                      (console script installed by pip)
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())

# SPDX-License-Identifier: MIT
"""Allow running the CLI with ``python -m semversion``."""

from .cli import main

if __name__ == "__main__":
    main()

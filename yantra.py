#!/usr/bin/env python3
"""yantra — static checker for the Yantrabhashi teaching language.

Thin entry point that delegates to src.validator.main.
"""

import sys

from src.validator.main import main

if __name__ == "__main__":
    sys.exit(main())

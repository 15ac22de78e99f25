#!/usr/bin/env python3
"""
Module: autolayername.__main__

Allows running the package as a module:
    python -m autolayername rename scene.json
"""

import sys

from autolayername.cli import main

if __name__ == "__main__":
    sys.exit(main())

"""Permite `python -m format_hook`."""

import sys

from .cli import main

sys.exit(main())

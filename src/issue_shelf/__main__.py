"""Entry point for ``python -m issue_shelf``."""

import sys

from issue_shelf.cli import main

sys.exit(main())

"""Allow running as ``python -m termsnip``."""

import sys

from termsnip.cli import main

sys.exit(main())

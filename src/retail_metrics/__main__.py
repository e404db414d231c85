"""Allow ``python -m retail_metrics``."""

import sys

from .cli import main

sys.exit(main())

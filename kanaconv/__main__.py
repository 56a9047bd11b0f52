"""Allow ``python -m kanaconv``."""

import sys

from .cli import main

sys.exit(main())

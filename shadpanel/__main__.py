"""Allow ``python -m shadpanel``."""

import sys

from shadpanel.cli import main

sys.exit(main())

"""Allow ``python -m crandom``."""

import sys

from crandom.cli import main

sys.exit(main())

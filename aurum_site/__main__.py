"""Allow ``python -m aurum_site``."""

import sys

from aurum_site.cli import main

sys.exit(main())

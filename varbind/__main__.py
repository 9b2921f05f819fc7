"""Allow running as python -m varbind."""

import sys

from varbind.cli.main import main

sys.exit(main())

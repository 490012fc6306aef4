"""Allow ``python -m pydeckcore``."""

from __future__ import annotations

import sys

from pydeckcore.cli import main

sys.exit(main())

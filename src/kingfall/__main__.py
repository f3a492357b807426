"""Allow ``python -m kingfall``."""

from __future__ import annotations

import sys

from kingfall.app import main

sys.exit(main())

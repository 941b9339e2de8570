"""Allow ``python -m chessrules``."""

import sys

from chessrules.app import main

sys.exit(main())

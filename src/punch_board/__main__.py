"""Allow ``python -m punch_board``."""

import sys

from punch_board.cli import main

sys.exit(main())

"""Allow ``python -m segpath``."""

import sys

from segpath.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())

"""Allow ``python -m kickoff``."""

import sys

from kickoff.cli import main

if __name__ == "__main__":
    sys.exit(main())

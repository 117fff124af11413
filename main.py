"""random.org client -- command-line entry point.

Equivalent to the installed ``randomorg`` script or ``python -m randomorg``.
Subcommands load settings and set up logging before any request is made:

    python main.py int --min 1 --max 6 --count 3
    python main.py bytes --length 16
    python main.py seq 1 10
    python main.py quota --percent
"""

import sys

from randomorg.cli import app

if __name__ == "__main__":
    sys.exit(app(prog_name="randomorg"))

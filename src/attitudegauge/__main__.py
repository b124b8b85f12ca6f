"""Command-line interface."""
import sys

from attitudegauge.render import main

if __name__ == "__main__":
    sys.exit(main())

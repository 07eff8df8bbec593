# main.py

import sys

from roster_extractor.cli import main

if __name__ == "__main__":
    sys.exit(main())

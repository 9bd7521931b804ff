"""python -m jobmatch [command] [options]"""
import sys

from jobmatch.cli import main

if __name__ == "__main__":
    sys.exit(main())

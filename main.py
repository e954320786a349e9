# main.py
import sys

from cf_sim.app.cli import main

if __name__ == "__main__":
    sys.exit(main())

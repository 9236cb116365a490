import sys

from cpu_throttling_calculator.cli import main

if __name__ == "__main__":
    sys.exit(main())

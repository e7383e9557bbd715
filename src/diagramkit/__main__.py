"""Allow ``python -m diagramkit``."""
import sys

from diagramkit.cli.main import main

if __name__ == "__main__":
    sys.exit(main())

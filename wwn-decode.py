"""Root-level shim entry point for wwn-decode.

Allows running directly as:  python wwn-decode.py [args]
"""

import sys

from wwn_decode.cli import main

if __name__ == "__main__":
    sys.exit(main())

import sys

from snapcall.cli import main

sys.exit(main())

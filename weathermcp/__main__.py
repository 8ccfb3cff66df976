import sys

from weathermcp.cli import main

sys.exit(main())

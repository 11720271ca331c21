"""Allow ``python -m hcpstatus``."""

import sys

from hcpstatus.cli import main

sys.exit(main())

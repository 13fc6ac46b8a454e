"""Allow ``python -m mmhelp``."""

import sys

from mmhelp.cli import main

sys.exit(main())

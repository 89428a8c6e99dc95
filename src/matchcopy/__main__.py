import sys

from .cli import matchcopy_main

sys.exit(matchcopy_main())

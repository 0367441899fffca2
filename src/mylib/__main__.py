"""Allow ``python -m mylib`` to run the demo program."""

import sys

from mylib.demo import main

sys.exit(main())

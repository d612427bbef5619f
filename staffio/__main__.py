import sys

from staffio.console import main

sys.exit(main())

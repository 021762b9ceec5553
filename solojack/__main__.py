import sys

from solojack.cli import main

sys.exit(main())

import sys

from googly.cli import main

sys.exit(main())

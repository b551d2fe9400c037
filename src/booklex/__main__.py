import sys

from booklex.cli import main

sys.exit(main())

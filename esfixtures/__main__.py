import sys

from esfixtures.cli import main

sys.exit(main())

import sys

from pytoll.cli import main

sys.exit(main())

import sys

from segdisplay.cli import main

sys.exit(main())

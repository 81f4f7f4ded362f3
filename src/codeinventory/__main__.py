import sys

from codeinventory.cli import main

sys.exit(main())

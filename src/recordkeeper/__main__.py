import sys

from recordkeeper.cli import main


sys.exit(main())

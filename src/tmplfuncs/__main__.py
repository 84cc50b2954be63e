import sys

from tmplfuncs.cli._dispatcher import main

sys.exit(main())

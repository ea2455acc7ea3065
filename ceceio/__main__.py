import sys

from ceceio.cli import main

sys.exit(main())

import sys

from greek_betacode.cli import main

sys.exit(main())

import sys

from charfreq.cli import main

sys.exit(main())

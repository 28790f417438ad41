import sys

from headr.cli import main

sys.exit(main())

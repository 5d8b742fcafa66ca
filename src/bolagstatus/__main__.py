import sys

from bolagstatus.cli import main

sys.exit(main())

import sys

from payinfo.cli import main

sys.exit(main())

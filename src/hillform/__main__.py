import sys

from hillform.cli import main

sys.exit(main())

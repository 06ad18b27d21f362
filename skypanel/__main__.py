import sys

from skypanel.cli import main

sys.exit(main())

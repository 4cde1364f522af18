import sys

from distress.cli import main

sys.exit(main())

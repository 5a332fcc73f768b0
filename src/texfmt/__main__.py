import sys

from _texfmt.cli import main

sys.exit(main())

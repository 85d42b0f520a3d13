import sys

from songlink_notes.cli import main

sys.exit(main())

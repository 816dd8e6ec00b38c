import sys

from intentglyph.cli import main

sys.exit(main())

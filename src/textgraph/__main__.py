import sys

from textgraph.cli import main

sys.exit(main())

import sys

from difflife.cli import main

sys.exit(main())

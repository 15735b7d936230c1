import sys

from wordbrain.cli import main

sys.exit(main())

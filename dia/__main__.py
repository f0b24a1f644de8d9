import sys

from dia.cli.main import main

sys.exit(main())

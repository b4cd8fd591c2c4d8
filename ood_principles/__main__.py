import sys

from ood_principles.cli.main import main

sys.exit(main())

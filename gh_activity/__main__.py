import sys

from gh_activity.cli import main

sys.exit(main())

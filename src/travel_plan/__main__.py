import sys

from travel_plan.cli import main

sys.exit(main())

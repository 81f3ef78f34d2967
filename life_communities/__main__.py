"""Allow ``python -m life_communities``."""

import sys

from life_communities.main import main

sys.exit(main())

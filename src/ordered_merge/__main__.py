import sys

from ordered_merge.main import main

sys.exit(main())

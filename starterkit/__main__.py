import sys

from starterkit.main import main

sys.exit(main())

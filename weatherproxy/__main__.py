import sys

from weatherproxy.cli import main

sys.exit(main())

import sys

from bignumber.driver.cli import main

sys.exit(main())

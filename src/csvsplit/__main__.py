import sys

from csvsplit.cli import main

sys.exit(main())

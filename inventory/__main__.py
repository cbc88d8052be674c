import sys

from inventory.main import main


sys.exit(main())

import sys

from mso2storm.cli import main


sys.exit(main())

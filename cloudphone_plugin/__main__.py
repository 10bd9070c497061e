import sys

from cloudphone_plugin.cli import main

sys.exit(main())

import sys

from tweakjson.cli import main

sys.exit(main())

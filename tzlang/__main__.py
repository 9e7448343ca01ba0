import sys

from tzlang.host import main

sys.exit(main())

import sys

from starpong.main import main

sys.exit(main())

import sys

from dicephrase.main import main

sys.exit(main())

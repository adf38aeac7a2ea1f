import sys

from jsonapi_store.cli import main

sys.exit(main())

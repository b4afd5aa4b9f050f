import sys

from daily_mood.main import main

sys.exit(main())

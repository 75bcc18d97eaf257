import sys

from incident_archiver.main import main

sys.exit(main())

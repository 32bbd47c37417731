import sys

from dns_provisioner.cli import main

sys.exit(main())

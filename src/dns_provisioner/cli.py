"""Command-line entry point."""

from __future__ import annotations

import logging
import sys

from dns_provisioner.auth import close_credential
from dns_provisioner.clients import build_clients
from dns_provisioner.config import load_config
from dns_provisioner.errors import ProvisionerError
from dns_provisioner.provisioner import Provisioner

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def main() -> int:
    """Load config from the environment, run the workflow, return an exit status."""
    logging.basicConfig(level=logging.INFO, format=_LOG_FORMAT)
    # The SDK logs every HTTP request at INFO
    logging.getLogger("azure").setLevel(logging.WARNING)

    try:
        config = load_config()
        with build_clients(config) as clients:
            Provisioner(clients, config).run()
    except ProvisionerError as exc:
        logger.error("%s", exc)
        return 1
    finally:
        close_credential()
    return 0


if __name__ == "__main__":
    sys.exit(main())

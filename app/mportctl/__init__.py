"""mportctl - command front-end for the mport package manager."""

import logging

__version__ = "0.1.0"

# Silent unless the CLI (or an embedding application) configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

from typing import Final

# Version of the A2A protocol these records describe.
PROTOCOL_VERSION: Final = "0.2.5"

JSONRPC_VERSION: Final = "2.0"

MAX_SCHEME_DESCRIPTION_LENGTH: Final = 500
MAX_EXTENSION_DESCRIPTION_LENGTH: Final = 1000

"""API-related constants."""

# HTTP Status Codes
HTTP_422_UNPROCESSABLE_CONTENT = 422

# HTTP Headers
REQUEST_ID_HEADER = "X-Request-ID"

# Request logging
MAX_USER_AGENT_LENGTH = 200

# Planet lookups
MAX_PLANET_ID = 2**63 - 1  # largest signed 64-bit BSON integer

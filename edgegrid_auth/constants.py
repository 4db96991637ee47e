"""
Constants for the EdgeGrid authentication library.
Values follow the EG1-HMAC-SHA256 signing protocol.
"""

# Authorization header
HEADER_AUTHORIZATION = "Authorization"
AUTH_SCHEME = "EG1-HMAC-SHA256"

# The signed request always claims https, whatever the transport
SIGNING_SCHEME = "https"

# Timestamp layout, e.g. 20140321T19:34:21+0000
TIMESTAMP_FORMAT = "%Y%m%dT%H:%M:%S+0000"

# Methods whose body contributes to the content hash
BODY_METHODS = frozenset({"POST", "PUT"})
SUPPORTED_METHODS = frozenset({"GET", "PUT", "POST", "DELETE", "HEAD"})

# .edgerc lookup
EDGERC_FILENAME = ".edgerc"
REQUIRED_EDGERC_KEYS = ("client_token", "client_secret", "access_token", "host")

# Defaults
DEFAULT_MAX_BODY = 2048
DEFAULT_VALID_FOR = "PT5M"
DEFAULT_SECTION = "default"

"""
EdgeGrid Authentication Library

Signs API requests with the EG1-HMAC-SHA256 scheme: a request description and
a set of client credentials produce an Authorization header that the server
recomputes to authenticate the call.

Example usage:
    from edgegrid_auth import RequestDescriptor, edgerc, sign

    credentials = edgerc.load(section="default")
    request = RequestDescriptor("GET", credentials.host, "/papi/v1/groups")
    header = sign(credentials, request)
"""

from . import edgerc
from .authentication import Authentication
from .canonicalizer import canonicalize_headers, make_content_hash, make_data_to_sign
from .edgerc import EdgeRcCredentials
from .exceptions import (
    EdgeGridError,
    ConfigException,
    SignerException,
    InvalidSignDataException
)
from .nonce import Nonce
from .request import Credentials, RequestDescriptor
from .requests_auth import EdgeGridAuth
from .signer import make_signing_key, sign
from .timestamp import Timestamp
from .constants import (
    AUTH_SCHEME,
    HEADER_AUTHORIZATION,
    DEFAULT_MAX_BODY,
    DEFAULT_VALID_FOR
)

__version__ = "1.0.0"
__all__ = [
    "Authentication",
    "Credentials",
    "EdgeGridAuth",
    "EdgeRcCredentials",
    "Nonce",
    "RequestDescriptor",
    "Timestamp",
    "canonicalize_headers",
    "edgerc",
    "make_content_hash",
    "make_data_to_sign",
    "make_signing_key",
    "sign",
    "EdgeGridError",
    "ConfigException",
    "SignerException",
    "InvalidSignDataException",
    "AUTH_SCHEME",
    "HEADER_AUTHORIZATION",
    "DEFAULT_MAX_BODY",
    "DEFAULT_VALID_FOR"
]

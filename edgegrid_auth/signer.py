"""
EG1-HMAC-SHA256 request signing.

The signature is computed in two HMAC-SHA256 steps: the client secret signs
the timestamp to derive a signing key, and that key signs the canonical
request string. Both results are base64 encoded.
"""

import base64
import hashlib
import hmac
import logging
from typing import Optional

from .canonicalizer import make_data_to_sign
from .constants import AUTH_SCHEME
from .exceptions import InvalidSignDataException
from .nonce import Nonce
from .request import Credentials, RequestDescriptor
from .timestamp import Timestamp

logger = logging.getLogger(__name__)


def sign_data(key: str, data: str) -> str:
    """Base64 encoded HMAC-SHA256 of data under key."""
    mac = hmac.new(key.encode('utf-8'), data.encode('utf-8'), hashlib.sha256)
    return base64.b64encode(mac.digest()).decode('ascii')


def make_signing_key(client_secret: str, timestamp: str) -> str:
    """Derive the timestamp-scoped key that signs the request."""
    return sign_data(client_secret, timestamp)


def make_auth_header_prefix(credentials: Credentials, timestamp: str, nonce: str) -> str:
    """Authorization value without the signature; also the last signed field."""
    fields = [
        ('client_token', credentials.client_token),
        ('access_token', credentials.access_token),
        ('timestamp', timestamp),
        ('nonce', nonce),
    ]
    return f"{AUTH_SCHEME} " + ''.join(f"{key}={value};" for key, value in fields)


def sign(credentials: Credentials,
         request: RequestDescriptor,
         timestamp: Optional[Timestamp] = None,
         nonce: Optional[Nonce] = None) -> str:
    """
    Compute the Authorization header value for a request.

    Args:
        credentials: Client credentials
        request: The request to sign
        timestamp: Signing timestamp; a fresh one is generated if omitted
        nonce: Request nonce; a fresh one is generated if omitted

    Returns:
        The full ``EG1-HMAC-SHA256 ...;signature=...`` header value

    Raises:
        InvalidSignDataException: If credentials are empty or an injected
            timestamp is outside its validity window
    """
    credentials.validate()

    if timestamp is None:
        timestamp = Timestamp.now()
    elif not timestamp.is_valid():
        raise InvalidSignDataException("Timestamp is invalid. Too old?")

    if nonce is None:
        nonce = Nonce.generate()

    timestamp_str = str(timestamp)
    auth_header = make_auth_header_prefix(credentials, timestamp_str, str(nonce))
    data_to_sign = make_data_to_sign(request, auth_header)

    logger.debug("Signing %s https://%s%s at %s",
                 request.method, request.host, request.path_and_query, timestamp_str)

    signing_key = make_signing_key(credentials.client_secret, timestamp_str)
    signature = sign_data(signing_key, data_to_sign)

    return f"{auth_header}signature={signature}"

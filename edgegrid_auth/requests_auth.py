"""
EdgeGrid signing for the requests library.

Example usage:
    import requests
    from edgegrid_auth import EdgeGridAuth

    session = requests.Session()
    session.auth = EdgeGridAuth.from_edgerc(section="default")
    response = session.get("https://akaa-xxx.luna.akamaiapis.net/papi/v1/groups")
"""

import logging
from typing import Optional, Sequence
from urllib.parse import urlsplit, urlunsplit

from requests.auth import AuthBase
from requests.models import PreparedRequest

from . import edgerc
from .constants import DEFAULT_MAX_BODY, HEADER_AUTHORIZATION
from .request import Credentials, RequestDescriptor
from .signer import sign

logger = logging.getLogger(__name__)


class EdgeGridAuth(AuthBase):
    """
    Attach an EG1-HMAC-SHA256 Authorization header to outgoing requests.

    Each request is signed with a fresh timestamp and nonce when it is
    prepared; sending it is left to the caller's session.
    """

    def __init__(self, client_token: str, client_secret: str, access_token: str,
                 headers_to_sign: Sequence[str] = (), max_body: int = DEFAULT_MAX_BODY):
        self.credentials = Credentials(client_token, client_secret, access_token)
        self.headers_to_sign = tuple(headers_to_sign)
        self.max_body = max_body

    @classmethod
    def from_edgerc(cls, path: Optional[str] = None, section: Optional[str] = None,
                    headers_to_sign: Sequence[str] = ()) -> 'EdgeGridAuth':
        """
        Build from an .edgerc section.

        Raises:
            ConfigException: If the file or section cannot be loaded
        """
        credentials = edgerc.load(path, section)
        return cls(
            credentials.client_token,
            credentials.client_secret,
            credentials.access_token,
            headers_to_sign=headers_to_sign,
            max_body=credentials.max_body,
        )

    def describe(self, r: PreparedRequest) -> RequestDescriptor:
        """Describe a prepared request for signing."""
        return RequestDescriptor.from_url(
            r.method,
            r.url,
            headers=list(r.headers.items()),
            headers_to_sign=self.headers_to_sign,
            body=r.body,
            max_body_size=self.max_body,
        )

    def __call__(self, r: PreparedRequest) -> PreparedRequest:
        request = self.describe(r)
        parts = urlsplit(r.url)
        if parts.query != request.query:
            # send the query exactly as it was signed
            r.prepare_url(urlunsplit(parts._replace(query=request.query)), None)
        r.headers[HEADER_AUTHORIZATION] = sign(self.credentials, request)
        logger.debug("Signed %s request to %s", request.method, request.host)
        return r

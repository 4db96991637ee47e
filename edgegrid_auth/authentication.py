"""
Builder-style facade over the signing function.

Example usage:
    auth = Authentication.create_from_edgerc_file('default')
    auth.set_http_method('GET')
    auth.set_path('/papi/v1/groups')
    header = auth.create_auth_header()
"""

from typing import Any, Dict, Optional, Sequence

from . import edgerc
from .constants import DEFAULT_MAX_BODY
from .exceptions import InvalidSignDataException
from .nonce import Nonce
from .request import Credentials, RequestDescriptor, normalize_query, parse_host, parse_path
from .signer import sign
from .timestamp import Timestamp


class Authentication:
    """
    Collects request details one setter at a time, then signs them.

    An instance holds mutable per-request state: configure it fully, sign,
    and do not share it between threads.
    """

    def __init__(self):
        self.auth: Optional[Credentials] = None
        self.host: str = ''
        self.path: Optional[str] = None
        self.headers: Dict[str, Any] = {}
        self.headers_to_sign: Sequence[str] = ()
        self.http_method: Optional[str] = None
        self.body: Any = None
        self.max_body_size = DEFAULT_MAX_BODY
        self.timestamp: Optional[Timestamp] = None
        self.nonce: Optional[Nonce] = None
        self.config: Dict[str, Any] = {}

    @classmethod
    def create_from_edgerc_file(cls, section: Optional[str] = None,
                                path: Optional[str] = None) -> 'Authentication':
        """
        Create an instance from an .edgerc section.

        Raises:
            ConfigException: If the file or section cannot be loaded
        """
        credentials = edgerc.load(path, section)
        auth = cls()
        auth.set_auth(credentials.client_token, credentials.client_secret,
                      credentials.access_token)
        auth.set_host(credentials.host)
        auth.set_max_body_size(credentials.max_body)
        return auth

    def set_auth(self, client_token: str, client_secret: str, access_token: str) -> 'Authentication':
        self.auth = Credentials(client_token, client_secret, access_token)
        return self

    def set_host(self, host: str) -> 'Authentication':
        """
        Set the API host; a scheme is dropped and an embedded path or query
        replaces the current one.
        """
        host, path, query = parse_host(host)
        self.host = host
        if path or query:
            self.path = path or '/'
        if query:
            self.set_query(query)
        return self

    def set_path(self, path: str) -> 'Authentication':
        """Set the request path; a full URL also sets the host."""
        host, path, query = parse_path(path)
        if host:
            self.host = host
        self.path = path or '/'
        if query:
            self.set_query(query)
        return self

    def set_query(self, query) -> 'Authentication':
        """Set the query from a raw string or a mapping of parameters."""
        self.config['query'] = normalize_query(query)
        return self

    def get_query(self) -> str:
        return self.config.get('query', '')

    def set_headers(self, headers: Dict[str, Any]) -> 'Authentication':
        self.headers = dict(headers or {})
        return self

    def set_headers_to_sign(self, headers_to_sign: Sequence[str]) -> 'Authentication':
        self.headers_to_sign = tuple(headers_to_sign or ())
        return self

    def set_http_method(self, method: str) -> 'Authentication':
        self.http_method = method.upper()
        return self

    def set_body(self, body) -> 'Authentication':
        self.body = body
        return self

    def set_max_body_size(self, max_body_size: int) -> 'Authentication':
        self.max_body_size = int(max_body_size)
        return self

    def set_timestamp(self, timestamp: Optional[Timestamp] = None) -> 'Authentication':
        """Pin the signing timestamp; with no argument a fresh one is used."""
        self.timestamp = timestamp if timestamp is not None else Timestamp.now()
        return self

    def set_nonce(self, nonce: Optional[Nonce] = None) -> 'Authentication':
        """Pin the nonce; with no argument a fresh one is used."""
        self.nonce = nonce if nonce is not None else Nonce.generate()
        return self

    def set_config(self, config: Dict[str, Any]) -> 'Authentication':
        """Replace the request options, keeping a query that was already set."""
        query = self.config.get('query')
        self.config = dict(config)
        if query and 'query' not in self.config:
            self.config['query'] = query
        return self

    def to_request(self) -> RequestDescriptor:
        """
        Freeze the collected state into a request descriptor.

        Raises:
            InvalidSignDataException: If no host or path is set
            ValueError: If no valid HTTP method is set
        """
        if self.path is None:
            raise InvalidSignDataException("Request path must be set before signing")
        headers = dict(self.config.get('headers') or {})
        headers.update(self.headers)
        return RequestDescriptor(
            method=self.http_method or '',
            host=self.host,
            path=self.path,
            query=self.get_query(),
            headers=headers,
            headers_to_sign=self.headers_to_sign,
            body=self.body,
            max_body_size=self.max_body_size,
        )

    def create_auth_header(self) -> str:
        """
        Sign the configured request.

        A timestamp and nonce are generated and kept on the instance when
        none were set.

        Raises:
            InvalidSignDataException: If credentials are missing or the
                timestamp has expired
        """
        if self.auth is None:
            raise InvalidSignDataException("Credentials must be set before signing")
        request = self.to_request()

        if self.timestamp is None:
            self.timestamp = Timestamp.now()
        if self.nonce is None:
            self.nonce = Nonce.generate()

        return sign(self.auth, request, self.timestamp, self.nonce)

"""
Value types describing what gets signed.

``Credentials`` and ``RequestDescriptor`` are immutable; all normalisation
(host splitting, query encoding, body encoding) happens once, at construction.
"""

import collections.abc
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Sequence, Tuple, Union
from urllib.parse import quote, urlencode, urlsplit

from .constants import DEFAULT_MAX_BODY, SUPPORTED_METHODS
from .exceptions import InvalidSignDataException

HeaderValue = Union[str, Tuple[str, ...]]
HeadersInput = Union[Mapping[str, Union[str, Sequence[str]]],
                     Iterable[Tuple[str, Union[str, Sequence[str]]]]]


@dataclass(frozen=True)
class Credentials:
    """Long-lived client credentials."""

    client_token: str
    client_secret: str = field(repr=False)
    access_token: str

    def validate(self):
        """Fail if any credential is empty."""
        for name in ('client_token', 'client_secret', 'access_token'):
            if not getattr(self, name):
                raise InvalidSignDataException(f"Credential {name} must not be empty")


def parse_host(value: str) -> Tuple[str, str, str]:
    """
    Split a host that may carry a scheme, path and query.

    Returns:
        Tuple of (host, path, query); path and query are empty when absent
    """
    if '://' not in value:
        value = '//' + value
    parts = urlsplit(value)
    return parts.netloc, parts.path, parts.query


def parse_path(value: str) -> Tuple[str, str, str]:
    """
    Split a path that may be a full URL or carry a query.

    Returns:
        Tuple of (host, path, query); host is empty unless a URL was given
    """
    if '://' in value:
        return parse_host(value)
    value = value.split('#', 1)[0]
    path, _, query = value.partition('?')
    return '', path, query


def normalize_query(query) -> str:
    """
    Bring a query into its canonical signing form.

    Raw strings have ``+`` spaces rewritten as ``%20``; mappings and pair
    lists are form-encoded with ``%20`` for spaces.
    """
    if query is None:
        return ''
    if isinstance(query, str):
        return query.lstrip('?').replace('+', '%20')
    return urlencode(query, doseq=True, quote_via=quote)


def encode_body(body) -> bytes:
    """
    Encode a raw or form body into the bytes that are sent.

    Raises:
        InvalidSignDataException: If the body is a stream or file object
    """
    if body is None:
        return b''
    if isinstance(body, (bytes, bytearray)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode('utf-8')
    if isinstance(body, (collections.abc.Mapping, list, tuple)):
        return urlencode(body, doseq=True).encode('utf-8')
    raise InvalidSignDataException("Streamed request bodies cannot be signed")


def normalize_headers(headers: Optional[HeadersInput]) -> Tuple[Tuple[str, HeaderValue], ...]:
    """Freeze headers into name/value pairs, list values into tuples."""
    if not headers:
        return ()
    items = headers.items() if isinstance(headers, collections.abc.Mapping) else headers
    frozen = []
    for name, value in items:
        if isinstance(value, (list, tuple)):
            value = tuple(str(v) for v in value)
        else:
            value = str(value)
        frozen.append((str(name), value))
    return tuple(frozen)


@dataclass(frozen=True)
class RequestDescriptor:
    """
    Everything about one request that contributes to its signature.

    Host may be given as a URL; an embedded path or query is used when no
    explicit one is supplied. Headers accept a mapping or a sequence of
    pairs, with list values for repeated headers.
    """

    method: str
    host: str
    path: str = ''
    query: Union[str, Mapping, Sequence, None] = ''
    headers: HeadersInput = ()
    headers_to_sign: Sequence[str] = ()
    body: Union[bytes, str, Mapping, Sequence, None] = b''
    max_body_size: int = DEFAULT_MAX_BODY

    def __post_init__(self):
        method = (self.method or '').upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {self.method!r}")

        host, host_path, host_query = parse_host(self.host or '')
        path_host, path, path_query = parse_path(self.path or '')
        host = host or path_host
        if not host:
            raise InvalidSignDataException("Request host must be set before signing")

        path = path or host_path or '/'
        if not path.startswith('/'):
            path = '/' + path

        query = normalize_query(self.query) or normalize_query(path_query or host_query)

        if self.max_body_size < 0:
            raise ValueError("max_body_size must not be negative")

        object.__setattr__(self, 'method', method)
        object.__setattr__(self, 'host', host)
        object.__setattr__(self, 'path', path)
        object.__setattr__(self, 'query', query)
        object.__setattr__(self, 'headers', normalize_headers(self.headers))
        object.__setattr__(self, 'headers_to_sign', tuple(self.headers_to_sign or ()))
        object.__setattr__(self, 'body', encode_body(self.body))

    @classmethod
    def from_url(cls, method: str, url: str, **kwargs) -> 'RequestDescriptor':
        """Describe a request from its full URL."""
        return cls(method=method, host=url, **kwargs)

    @property
    def path_and_query(self) -> str:
        return f"{self.path}?{self.query}" if self.query else self.path

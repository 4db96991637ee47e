"""
Serialise a request into the exact string that gets signed.
"""

import base64
import hashlib
import re
from typing import Sequence, Tuple

from .constants import BODY_METHODS, SIGNING_SCHEME
from .request import HeaderValue, RequestDescriptor

_WHITESPACE_RE = re.compile(r'\s+')


def canonicalize_header_value(value: HeaderValue) -> str:
    """Join list values with commas and collapse whitespace runs."""
    if isinstance(value, tuple):
        value = ','.join(value)
    return _WHITESPACE_RE.sub(' ', value.strip())


def canonicalize_headers(headers: Sequence[Tuple[str, HeaderValue]],
                         headers_to_sign: Sequence[str]) -> str:
    """
    Render the signed headers as tab separated ``name:value`` pairs.

    Emission order follows headers_to_sign. Names are matched
    case-insensitively; headers missing from the request and headers with an
    empty value list are left out.
    """
    lookup = {}
    for name, value in headers:
        lookup.setdefault(name.lower(), value)

    canonical = []
    for name in headers_to_sign:
        value = lookup.get(name.lower())
        if value is None or value == ():
            continue
        canonical.append(f"{name.lower()}:{canonicalize_header_value(value)}")
    return '\t'.join(canonical)


def make_content_hash(method: str, body: bytes, max_body_size: int) -> str:
    """
    Hash the request body for methods that carry one.

    Bodies longer than max_body_size are truncated before hashing; a body
    truncated to nothing hashes like an absent one.
    """
    if method.upper() not in BODY_METHODS:
        return ''
    body = body[:max_body_size]
    if not body:
        return ''
    digest = hashlib.sha256(body).digest()
    return base64.b64encode(digest).decode('ascii')


def make_data_to_sign(request: RequestDescriptor, auth_header: str) -> str:
    """
    Build the canonical string for a request.

    Args:
        request: The request being signed
        auth_header: Authorization value up to, but excluding, the signature

    Returns:
        Tab separated canonical string
    """
    return '\t'.join([
        request.method,
        SIGNING_SCHEME,
        request.host,
        request.path_and_query,
        canonicalize_headers(request.headers, request.headers_to_sign),
        make_content_hash(request.method, request.body, request.max_body_size),
        auth_header,
    ])

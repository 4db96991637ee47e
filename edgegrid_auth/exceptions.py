"""
Custom exceptions for the EdgeGrid authentication library.
"""


class EdgeGridError(Exception):
    """Base exception for EdgeGrid authentication errors."""
    pass


class ConfigException(EdgeGridError):
    """Raised when the .edgerc file or section cannot be used."""
    pass


class SignerException(EdgeGridError):
    """Base exception for errors raised while signing a request."""
    pass


class InvalidSignDataException(SignerException):
    """Raised when the data to sign is incomplete or stale."""
    pass

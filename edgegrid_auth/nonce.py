"""
Per-request nonces.
"""

import uuid
from typing import Optional


class Nonce:
    """Single-use random token, UUID v4 unless a value is pinned."""

    def __init__(self, value: Optional[str] = None):
        # uuid4 draws from os.urandom
        self.value = value if value is not None else str(uuid.uuid4())

    @classmethod
    def generate(cls) -> 'Nonce':
        """Create a fresh random nonce."""
        return cls()

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Nonce({self.value!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, Nonce):
            return self.value == other.value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

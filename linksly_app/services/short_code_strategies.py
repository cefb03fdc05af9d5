"""
Short code generation strategies for the link shortener.
Uses Strategy Pattern to allow different generation algorithms.
"""

import secrets
import string
from abc import ABC, abstractmethod


class ShortCodeStrategy(ABC):
    """Abstract base class for short code generation strategies"""

    @abstractmethod
    def generate(self) -> str:
        """
        Generate a candidate short code.

        Strategies do not consult the database. Uniqueness is enforced by the
        `short_code` constraint and the service retries on a violation.

        Returns:
            A short code string
        """
        pass


class UrlSafeShortCodeStrategy(ShortCodeStrategy):
    """
    Random code over the URL-safe alphabet (A-Z, a-z, 0-9, '_' and '-').

    Same alphabet as nanoid, so 8 characters give 64^8 (~2.8e14) codes.
    """

    ALPHABET = string.ascii_letters + string.digits + "_-"

    def __init__(self, length: int = 8):
        self.length = length

    def generate(self) -> str:
        return ''.join(secrets.choice(self.ALPHABET) for _ in range(self.length))


class Base62ShortCodeStrategy(ShortCodeStrategy):
    """
    Random integer encoded in Base62 and left-padded to a fixed length.

    Produces purely alphanumeric codes.
    """

    BASE62_CHARS = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

    def __init__(self, length: int = 8):
        self.length = length

    def generate(self) -> str:
        number = secrets.randbelow(62 ** self.length)
        return self._base62_encode(number).rjust(self.length, self.BASE62_CHARS[0])

    def _base62_encode(self, number: int) -> str:
        """
        Convert integer to Base62 string.

        Base62 uses: 0-9 (10) + a-z (26) + A-Z (26) = 62 characters
        """
        if number == 0:
            return self.BASE62_CHARS[0]

        result = ""
        while number > 0:
            result = self.BASE62_CHARS[number % 62] + result
            number //= 62

        return result

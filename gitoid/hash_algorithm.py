import hashlib
from enum import Enum
from typing import Callable, NamedTuple

from .errors import UnknownAlgorithm


class HashAlgorithm(str, Enum):
    SHA1 = 'sha1'
    SHA256 = 'sha256'

    def __str__(self):
        return self.value

    @classmethod
    def resolve(cls, name: 'str | HashAlgorithm') -> 'HashAlgorithm':
        """Look up an algorithm by its canonical name.

        Matching is exact: 'SHA1' or ' sha1' are unknown, never a fallback.
        """
        try:
            return cls(name)
        except ValueError:
            raise UnknownAlgorithm(name) from None

    @property
    def canonical_name(self) -> str:
        return self.value

    @property
    def digest_length(self) -> int:
        return _REGISTRY[self].digest_length

    def new_digester(self):
        return _REGISTRY[self].new()


class _Entry(NamedTuple):
    digest_length: int
    new: Callable


# One line per algorithm; nothing else needs to change to add one.
_REGISTRY: dict[HashAlgorithm, _Entry] = {
    HashAlgorithm.SHA1: _Entry(digest_length=20, new=hashlib.sha1),
    HashAlgorithm.SHA256: _Entry(digest_length=32, new=hashlib.sha256),
}

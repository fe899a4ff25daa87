from typing import TypeAlias, NamedTuple

from . import errors
from .hash_algorithm import HashAlgorithm
from .object_type import ObjectType

Digest: TypeAlias = bytes  # raw hash output
HexDigest: TypeAlias = str  # lowercase hex of a Digest
Url: TypeAlias = str  # gitoid:<object-type>:<hash-algorithm>:<hex>

SCHEME = 'gitoid'


class _GitOidFields(NamedTuple):
    hash_algorithm: HashAlgorithm
    object_type: ObjectType
    digest: Digest


class GitOid(_GitOidFields):
    """An identifier; always holds registry members and a digest of the right length."""
    __slots__ = ()

    def __new__(cls, hash_algorithm, object_type, digest):
        hash_algorithm = HashAlgorithm.resolve(hash_algorithm)
        object_type = ObjectType.resolve(object_type)
        digest = bytes(memoryview(digest))
        if len(digest) != hash_algorithm.digest_length:
            raise errors.MalformedDigest(
                f"unexpected hash length; expected '{hash_algorithm.digest_length}', got '{len(digest)}'")
        return super().__new__(cls, hash_algorithm, object_type, digest)

    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

    def __str__(self):
        return f'{SCHEME}:{self.object_type_name()}:{self.algorithm_name()}:{self.hex()}'

    def algorithm_name(self) -> str:
        return self.hash_algorithm.canonical_name

    def object_type_name(self) -> str:
        return self.object_type.canonical_name

    def digest_bytes(self) -> Digest:
        return self.digest

    def digest_length(self) -> int:
        return len(self.digest)

    def hex(self) -> HexDigest:
        return self.digest.hex()


class UrlParts(NamedTuple):
    scheme: str
    object_type: str
    hash_algorithm: str
    hex_digest: str

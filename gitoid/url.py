"""Canonical URL form of a gitoid.

    gitoid:<object-type>:<hash-algorithm>:<hex-digest>

Every field is checked in order (scheme and field count, object type,
hash algorithm, digest) and the first failure is the one reported.
"""
import logging
import string

from . import errors
from .hash_algorithm import HashAlgorithm
from .object_type import ObjectType
from .types import SCHEME, Digest, GitOid, Url, UrlParts

logger = logging.getLogger(__name__)


def format_url(gitoid: GitOid) -> Url:
    return str(gitoid)


def split_url(url: Url) -> UrlParts:
    if not isinstance(url, str):
        raise errors.MalformedUrl(f'expected a string, got {type(url).__name__}')

    fields = url.split(':')
    if fields[0] != SCHEME:
        raise errors.MalformedUrl(f"invalid scheme in URL '{fields[0]}'")
    if len(fields) > 4:
        raise errors.MalformedUrl(f"too many fields in URL '{url}'")

    fields += [''] * (4 - len(fields))
    for name, field in zip(('object type', 'hash algorithm', 'hash'), fields[1:]):
        if not field:
            raise errors.MalformedUrl(f"missing {name} in URL '{url}'")
    return UrlParts(*fields)


def _decode_digest(hex_digest: str, hash_algorithm: HashAlgorithm) -> Digest:
    if len(hex_digest) % 2 or not all(c in string.hexdigits for c in hex_digest):
        raise errors.MalformedDigest(f"invalid hex string '{hex_digest}'")

    value = bytes.fromhex(hex_digest)
    if len(value) != hash_algorithm.digest_length:
        raise errors.MalformedDigest(
            f"unexpected hash length; expected '{hash_algorithm.digest_length}', got '{len(value)}'")
    return value


def parse_url(url: Url) -> GitOid:
    try:
        parts = split_url(url)
        object_type = ObjectType.resolve(parts.object_type)
        hash_algorithm = HashAlgorithm.resolve(parts.hash_algorithm)
        value = _decode_digest(parts.hex_digest, hash_algorithm)
    except errors.GitOidError as e:
        logger.debug('rejected gitoid URL %r: %s', url, e)
        raise
    return GitOid(hash_algorithm=hash_algorithm, object_type=object_type, digest=value)

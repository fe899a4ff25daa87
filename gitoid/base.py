import logging

from typing_extensions import Buffer

from . import data
from . import errors
from . import url as url_
from .hash_algorithm import HashAlgorithm
from .object_type import ObjectType
from .types import GitOid, Url

logger = logging.getLogger(__name__)


def _resolve(hash_algorithm, object_type) -> tuple[HashAlgorithm, ObjectType]:
    # None means "use the configured default"
    defaults = data.get_defaults()
    if hash_algorithm is None:
        hash_algorithm = defaults.hash_algorithm
    if object_type is None:
        object_type = defaults.object_type
    return HashAlgorithm.resolve(hash_algorithm), ObjectType.resolve(object_type)


def from_content_bytes(hash_algorithm: HashAlgorithm | str | None,
                       object_type: ObjectType | str | None,
                       content: Buffer,
                       content_length: int | None = None) -> GitOid:
    """Identify a bytes-like object.

    content_length is optional. When given it has to match the size of the
    buffer; a mismatch would put a wrong length in the header and produce
    an identifier for content that doesn't exist, so it is refused.
    """
    hash_algorithm, object_type = _resolve(hash_algorithm, object_type)
    actual_length = memoryview(content).nbytes
    if content_length is not None and content_length != actual_length:
        raise errors.ContentLengthMismatch(expected=content_length, actual=actual_length)

    gitoid = GitOid(hash_algorithm=hash_algorithm,
                    object_type=object_type,
                    digest=data.hash_object(content, object_type, hash_algorithm))
    logger.debug('identified %d bytes as %s', actual_length, gitoid)
    return gitoid


def from_content_string(hash_algorithm: HashAlgorithm | str | None,
                        object_type: ObjectType | str | None,
                        text: str) -> GitOid:
    if not isinstance(text, str):
        raise TypeError(f'expected a string, got {type(text).__name__}')
    # The identifier is of the UTF-8 bytes exactly as given, no normalization.
    return from_content_bytes(hash_algorithm, object_type, text.encode('utf-8'))


def from_url(url: Url) -> GitOid:
    return url_.parse_url(url)


def to_url(gitoid: GitOid) -> Url:
    return url_.format_url(gitoid)


def is_valid(gitoid: GitOid | None) -> bool:
    return (isinstance(gitoid, GitOid)
            and isinstance(gitoid.hash_algorithm, HashAlgorithm)
            and isinstance(gitoid.object_type, ObjectType)
            and isinstance(gitoid.digest, bytes)
            and len(gitoid.digest) == gitoid.hash_algorithm.digest_length)

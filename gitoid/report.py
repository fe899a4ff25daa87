"""Check-after-call access to the gitoid API.

Adapter layers that can't carry exceptions (C bindings, other runtimes)
use the functions here: each returns None on failure and leaves a message
in a last-error slot, read back with get_error().

The slot is a ContextVar, so each thread and each asyncio task has its own.
A message is only meaningful right after a call returned None in the same
context; successful calls leave an older message in place.
"""
import functools
import logging
from contextvars import ContextVar
from enum import Enum

from typing_extensions import Buffer

from . import base
from .hash_algorithm import HashAlgorithm
from .object_type import ObjectType
from .types import Digest, GitOid, HexDigest, Url

logger = logging.getLogger(__name__)

_last_error: ContextVar[str | None] = ContextVar('gitoid_last_error', default=None)


class ErrorMessage(str, Enum):
    NOT_GITOID_URL = 'string is not a valid GitOID URL'
    GITOID_IS_NONE = 'GitOID is None'
    STRING_IS_NONE = 'string is None'
    CONTENT_IS_NONE = 'content is None'

    def __str__(self):
        return self.value


def set_error(message) -> None:
    _last_error.set(str(message))


def clear_error() -> None:
    _last_error.set(None)


def get_error(max_len: int | None = None) -> str:
    """Return the last error message, or '' if there is none.

    With max_len, the result fits a buffer of that many bytes including a
    terminator: at most max_len - 1 bytes of UTF-8, cut on a character
    boundary.
    """
    message = _last_error.get() or ''
    if max_len is None:
        return message
    if max_len <= 0:
        return ''
    return message.encode('utf-8')[:max_len - 1].decode('utf-8', errors='ignore')


def _checked(message: ErrorMessage | None = None):
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (ValueError, TypeError, BufferError) as e:
                logger.debug('%s failed: %s', func.__name__, e)
                set_error(message or e)
                return None
        return wrapper
    return decorator


def _require(gitoid: GitOid | None) -> GitOid:
    if not base.is_valid(gitoid):
        raise ValueError(ErrorMessage.GITOID_IS_NONE.value)
    return gitoid


@_checked()
def new_from_str(hash_algorithm: HashAlgorithm | str, object_type: ObjectType | str, s: str) -> GitOid | None:
    if s is None:
        raise ValueError(ErrorMessage.STRING_IS_NONE.value)
    return base.from_content_string(hash_algorithm, object_type, s)


@_checked()
def new_from_bytes(hash_algorithm: HashAlgorithm | str, object_type: ObjectType | str,
                   content: Buffer, content_len: int) -> GitOid | None:
    if content is None:
        raise ValueError(ErrorMessage.CONTENT_IS_NONE.value)
    return base.from_content_bytes(hash_algorithm, object_type, content, content_len)


@_checked(ErrorMessage.NOT_GITOID_URL)
def new_from_url(s: Url) -> GitOid | None:
    return base.from_url(s)


def invalid(gitoid: GitOid | None) -> bool:
    return not base.is_valid(gitoid)


@_checked()
def get_url(gitoid: GitOid | None) -> Url | None:
    return base.to_url(_require(gitoid))


@_checked()
def get_hash_bytes(gitoid: GitOid | None) -> Digest | None:
    return _require(gitoid).digest_bytes()


@_checked()
def get_hash_string(gitoid: GitOid | None) -> HexDigest | None:
    return _require(gitoid).hex()


@_checked()
def hash_algorithm_name(hash_algorithm: HashAlgorithm | str) -> str | None:
    return HashAlgorithm.resolve(hash_algorithm).canonical_name


@_checked()
def object_type_name(object_type: ObjectType | str) -> str | None:
    return ObjectType.resolve(object_type).canonical_name

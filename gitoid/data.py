import operator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import NamedTuple

from typing_extensions import Buffer

from .hash_algorithm import HashAlgorithm
from .object_type import ObjectType
from .types import Digest

CHUNK_SIZE = 64 * 1024


class Defaults(NamedTuple):
    hash_algorithm: HashAlgorithm
    object_type: ObjectType


# Per thread / per task, like the last-error slot in report.py
_defaults: ContextVar[Defaults] = ContextVar(
    'gitoid_defaults', default=Defaults(HashAlgorithm.SHA256, ObjectType.BLOB))


def get_defaults() -> Defaults:
    return _defaults.get()


@contextmanager
def change_defaults(hash_algorithm=None, object_type=None):
    old_defaults = _defaults.get()
    new_defaults = Defaults(
        old_defaults.hash_algorithm if hash_algorithm is None else HashAlgorithm.resolve(hash_algorithm),
        old_defaults.object_type if object_type is None else ObjectType.resolve(object_type),
    )
    token = _defaults.set(new_defaults)
    try:
        yield new_defaults
    finally:
        _defaults.reset(token)


def predigest(object_type: ObjectType, content_length: int) -> bytes:
    """Header hashed in front of the content: b'<type> <length>\\x00'."""
    content_length = operator.index(content_length)
    if content_length < 0:
        raise ValueError(f'content length must not be negative, got {content_length}')
    return f'{object_type.canonical_name} {content_length}\x00'.encode('ascii')


def _byte_view(content: Buffer) -> memoryview:
    view = memoryview(content)
    if not view.c_contiguous:
        view = memoryview(view.tobytes())
    return view.cast('B')


def digest(hash_algorithm: HashAlgorithm, header: bytes, content: Buffer) -> Digest:
    digester = hash_algorithm.new_digester()
    digester.update(header)
    view = _byte_view(content)
    for start in range(0, len(view), CHUNK_SIZE):
        digester.update(view[start:start + CHUNK_SIZE])
    return digester.digest()


def hash_object(content: Buffer, type_: ObjectType | None = None,
                hash_algorithm: HashAlgorithm | None = None) -> Digest:
    defaults = get_defaults()
    type_ = defaults.object_type if type_ is None else ObjectType.resolve(type_)
    hash_algorithm = defaults.hash_algorithm if hash_algorithm is None else HashAlgorithm.resolve(hash_algorithm)
    header = predigest(type_, memoryview(content).nbytes)
    return digest(hash_algorithm, header, content)

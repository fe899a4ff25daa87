"""Tests for building gitoids from content and from URLs."""

import pytest

from gitoid import base
from gitoid.errors import ContentLengthMismatch, MalformedDigest, UnknownAlgorithm, UnknownObjectType
from gitoid.hash_algorithm import HashAlgorithm
from gitoid.object_type import ObjectType
from gitoid.types import GitOid
from conftest import HELLO_SHA1, HELLO_SHA256, HELLO_SHA256_URL


def test_from_content_string_sha1():
    gitoid = base.from_content_string(HashAlgorithm.SHA1, ObjectType.BLOB, 'hello world')
    assert gitoid.digest_length() == 20
    assert gitoid.digest_bytes()[0] == 0x95
    assert gitoid.hex() == HELLO_SHA1
    assert gitoid.algorithm_name() == 'sha1'
    assert gitoid.object_type_name() == 'blob'


def test_from_content_string_accepts_names():
    gitoid = base.from_content_string('sha256', 'blob', 'hello world')
    assert gitoid.hash_algorithm is HashAlgorithm.SHA256
    assert gitoid.hex() == HELLO_SHA256


def test_from_content_string_is_utf8_without_normalization():
    composed = base.from_content_string('sha1', 'blob', '\u00e9')
    decomposed = base.from_content_string('sha1', 'blob', 'e\u0301')
    assert composed == base.from_content_bytes('sha1', 'blob', b'\xc3\xa9')
    assert composed != decomposed


def test_from_content_bytes_sequence():
    gitoid = base.from_content_bytes(HashAlgorithm.SHA1, ObjectType.BLOB, bytes(range(16)), 16)
    assert gitoid.digest_length() == 20
    assert gitoid.digest_bytes()[0] == 0xB6


def test_from_content_bytes_is_deterministic():
    first = base.from_content_bytes('sha256', 'blob', b'\x00\x01\x02' * 1000)
    second = base.from_content_bytes('sha256', 'blob', b'\x00\x01\x02' * 1000)
    assert first.digest_bytes() == second.digest_bytes()
    assert first == second


def test_from_content_bytes_length_mismatch():
    with pytest.raises(ContentLengthMismatch) as exc_info:
        base.from_content_bytes('sha1', 'blob', b'hello', 6)
    assert exc_info.value.expected == 6
    assert exc_info.value.actual == 5


def test_from_content_bytes_unknown_names():
    with pytest.raises(UnknownAlgorithm):
        base.from_content_bytes('md5', 'blob', b'')
    with pytest.raises(UnknownObjectType):
        base.from_content_bytes('sha1', 'tree', b'')


def test_none_uses_configured_defaults():
    gitoid = base.from_content_string(None, None, 'hello world')
    assert gitoid.hash_algorithm is HashAlgorithm.SHA256
    assert gitoid.object_type is ObjectType.BLOB


@pytest.mark.parametrize('algorithm', list(HashAlgorithm))
def test_digest_length_invariant(algorithm):
    gitoid = base.from_content_bytes(algorithm, 'blob', b'some content')
    assert len(gitoid.digest_bytes()) == algorithm.digest_length


def test_from_url():
    gitoid = base.from_url(HELLO_SHA256_URL)
    assert gitoid.digest_length() == 32
    assert gitoid.digest_bytes()[0] == 0xFE
    assert base.to_url(gitoid) == HELLO_SHA256_URL
    assert gitoid == base.from_content_string('sha256', 'blob', 'hello world')


def test_gitoid_is_immutable():
    gitoid = base.from_content_string('sha1', 'blob', 'hello world')
    with pytest.raises(AttributeError):
        gitoid.digest = b''
    assert hash(gitoid) == hash(base.from_content_string('sha1', 'blob', 'hello world'))


def test_from_content_string_rejects_non_string():
    with pytest.raises(TypeError):
        base.from_content_string('sha1', 'blob', None)
    with pytest.raises(TypeError):
        base.from_content_string('sha1', 'blob', b'hello world')


def test_is_valid():
    assert base.is_valid(base.from_content_string('sha1', 'blob', 'x'))
    assert not base.is_valid(None)
    assert not base.is_valid(('sha1', 'blob', b'\x00' * 20))


# ---- GitOid construction ----

def test_gitoid_resolves_names_to_members():
    gitoid = GitOid('sha1', 'blob', bytearray(20))
    assert gitoid.hash_algorithm is HashAlgorithm.SHA1
    assert gitoid.object_type is ObjectType.BLOB
    assert type(gitoid.digest) is bytes
    assert base.is_valid(gitoid)
    assert base.to_url(gitoid) == 'gitoid:blob:sha1:' + '00' * 20


@pytest.mark.parametrize('digest', [b'', b'\x00' * 19, b'\x00' * 32])
def test_gitoid_rejects_wrong_digest_length(digest):
    with pytest.raises(MalformedDigest):
        GitOid(HashAlgorithm.SHA1, ObjectType.BLOB, digest)


def test_gitoid_rejects_unknown_names():
    with pytest.raises(UnknownAlgorithm):
        GitOid('md5', ObjectType.BLOB, b'\x00' * 16)
    with pytest.raises(UnknownObjectType):
        GitOid(HashAlgorithm.SHA1, 'tree', b'\x00' * 20)


def test_gitoid_rejects_non_bytes_digest():
    with pytest.raises(TypeError):
        GitOid(HashAlgorithm.SHA1, ObjectType.BLOB, 20)


def test_gitoid_replace_is_checked():
    gitoid = base.from_content_string('sha1', 'blob', 'hello world')
    with pytest.raises(MalformedDigest):
        gitoid._replace(hash_algorithm=HashAlgorithm.SHA256)

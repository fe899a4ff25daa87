"""Shared test fixtures."""

import pytest

from gitoid import report

HELLO_SHA1 = '95d09f2b10159347eece71399a7e2e907ea3df4f'
HELLO_SHA256 = 'fee53a18d32820613c0527aa79be5cb30173c823a9b448fa4817767cc84c6f03'
HELLO_SHA256_URL = f'gitoid:blob:sha256:{HELLO_SHA256}'


@pytest.fixture(autouse=True)
def clean_last_error():
    report.clear_error()
    yield
    report.clear_error()

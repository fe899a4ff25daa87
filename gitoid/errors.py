class GitOidError(ValueError):
    """Base class for everything that can go wrong building or parsing a gitoid."""


class UnknownAlgorithm(GitOidError):
    def __init__(self, name):
        super().__init__(f"unknown hash algorithm '{name}'")
        self.name = name


class UnknownObjectType(GitOidError):
    def __init__(self, name):
        super().__init__(f"unknown object type '{name}'")
        self.name = name


class MalformedUrl(GitOidError):
    """Wrong scheme, wrong number of fields, or an empty field."""


class MalformedDigest(GitOidError):
    """The hex run is not hexadecimal or has the wrong length for its algorithm."""


class ContentLengthMismatch(GitOidError):
    def __init__(self, expected: int, actual: int):
        super().__init__(f"unexpected content length; expected '{expected}', got '{actual}'")
        self.expected = expected
        self.actual = actual

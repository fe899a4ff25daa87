from enum import Enum

from .errors import UnknownObjectType


class ObjectType(str, Enum):
    BLOB = 'blob'

    def __str__(self):
        return self.value

    @classmethod
    def resolve(cls, name: 'str | ObjectType') -> 'ObjectType':
        try:
            return cls(name)
        except ValueError:
            raise UnknownObjectType(name) from None

    @property
    def canonical_name(self) -> str:
        return self.value

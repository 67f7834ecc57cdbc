from dataclasses import dataclass
from .ast import Type, TypeInstance
from .error import DuplicateBindingError


@dataclass(frozen=True)
class Constructor:
    type: Type
    instance: TypeInstance
    length: int
    value: int


class Scope:

    def __init__(self, parent=None):
        self.parent = parent
        self.names = {}

    def child(self):
        return Scope(self)

    def declares(self, name):
        return name in self.names

    def __contains__(self, name):
        return self.get(name) is not None

    def get(self, name):
        scope = self
        while scope is not None:
            if name in scope.names:
                return scope.names[name]
            scope = scope.parent
        return None

    def set(self, name, value):
        if name in self.names:
            raise DuplicateBindingError(name)
        self.names[name] = value

import typing
from string import ascii_lowercase
from .location import Position


def field_label(i):
    label = ascii_lowercase[i % 26]
    while i >= 26:
        i = i // 26 - 1
        label = ascii_lowercase[i % 26] + label
    return label


class Node:
    pos: typing.Optional[Position] = None

    def __init__(self, *args, **kwargs):
        if args:
            self.pos = args[0]
        self.__dict__.update(kwargs)

    @classmethod
    def node_fields(cls):
        keys = []
        for klass in reversed(cls.__mro__):
            for key in getattr(klass, "__annotations__", {}):
                if key not in keys:
                    keys.append(key)
        return keys

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(
            getattr(self, key, None) == getattr(other, key, None)
            for key in self.node_fields())

    __hash__ = object.__hash__

    def __repr__(self):
        return "<{} {}>".format(
            self.__class__.__name__,
            ", ".join(
                f"{key}={getattr(self, key)!r}"
                for key in self.node_fields()
                if key != "pos" and hasattr(self, key))
        )


class Declaration(Node):
    pass

class Expression(Node):
    pass

class Identifier(Expression):
    id: str

class Literal(Expression):
    value: str

class Call(Expression):
    id: Identifier
    args: typing.List[Expression]

class Member(Expression):
    parent: str
    prop: str

class TypeInstance(Node):
    id: Identifier
    values: typing.List[Identifier]

class MatchExpr(Node):
    typeinstance: TypeInstance
    expression: Expression

class Match(Expression):
    id: Identifier
    expressions: typing.List[MatchExpr]

class File(Node):
    body: typing.List[Declaration]

class Data(Declaration):
    id: Identifier
    fields: typing.List[Identifier]

class Import(Declaration):
    path: Literal
    imports: typing.List[Identifier]

class Type(Declaration):
    id: Identifier
    types: typing.List[TypeInstance]

    @property
    def values(self):
        return max((len(t.values) for t in self.types), default=0)

class Function(Declaration):
    id: Identifier
    args: typing.List[Identifier]
    body: Expression

class Export(Declaration):
    names: typing.List[Identifier]

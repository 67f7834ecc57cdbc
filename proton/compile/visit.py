from functools import partial
from .error import Error


class BoundMatch:

    def __init__(self, table, instance):
        self.table = table
        self.instance = instance

    def __call__(self, node, *args, **kwargs):
        func = self.table.get(type(node))
        if func is None:
            raise TypeError(f"no handler for {type(node).__name__}")
        return func(self.instance, node, *args, **kwargs)

    def get(self, node):
        func = self.table.get(type(node))
        if func is None:
            return None
        return partial(func, self.instance, node)


class MatchDescriptor(dict):

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return BoundMatch(self, instance)

class VisitorMetaDict(dict):
    def __setitem__(self, name, value):
        if isinstance(value, MatchDescriptor):
            value.update(self.get(name, {}))
        super().__setitem__(name, value)

class VisitorMeta(type):

    @classmethod
    def __prepare__(self, name, bases):
        d = VisitorMetaDict()
        def _(*types):
            def decorator(func):
                return MatchDescriptor({t:func for t in types})
            return decorator
        d['_'] = _
        return d

    def __new__(self, name, bases, attrs):
        attrs.pop("_")
        return type.__new__(self, name, bases, dict(attrs))

class Visitor(Error, metaclass=VisitorMeta):

    def __init__(self, filename=None, text=None):
        self.filename = filename
        self.text = text

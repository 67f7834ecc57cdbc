import logging
from typing import List, NamedTuple
from .visit import Visitor
from .scope import Scope, Constructor
from .error import (
    ArityError, ConflictingTypesError, DuplicateBindingError, EmptyMatchError,
    NotATypeError, UndefinedIdentifierError)
from . import ast

logger = logging.getLogger(__name__)


class Analysis(NamedTuple):
    exports: List[ast.Export]
    functions: List[ast.Function]
    scope: Scope


class AnalyseVisitor(Visitor):

    def bind(self, scope, identifier, value):
        if scope.declares(identifier.id):
            self.error(identifier.pos, identifier.id, DuplicateBindingError)
        scope.set(identifier.id, value)

    def analyse(self, node):
        scope = Scope()
        exports = []
        functions = []

        for top in node.body:
            declare = self.declare.get(top)
            if declare is None:
                logger.warning("%s missing analyse", type(top).__name__)
                continue
            declare(scope)

            if isinstance(top, ast.Function):
                functions.append(top)
            elif isinstance(top, ast.Export):
                exports.append(top)

        for fn in functions:
            self.visit_function(fn, scope)

        for export in exports:
            self.visit(export, scope)

        return Analysis(exports, functions, scope)

    @_(ast.Data, ast.Export)
    def declare(self, node, scope):
        pass

    @_(ast.Type)
    def declare(self, node, scope):
        for value, instance in enumerate(node.types):
            self.bind(scope, instance.id, Constructor(node, instance, len(node.types), value))

    @_(ast.Import)
    def declare(self, node, scope):
        for name in node.imports:
            self.bind(scope, name, node)

    @_(ast.Function)
    def declare(self, node, scope):
        self.bind(scope, node.id, node)

    def visit_function(self, node, parent):
        node.scope = parent.child()
        for arg in node.args:
            self.bind(node.scope, arg, arg)
        self.visit(node.body, node.scope)

    @_(ast.Export)
    def visit(self, node, scope):
        for name in node.names:
            self.visit(name, scope)

    @_(ast.Identifier)
    def visit(self, node, scope):
        if scope.get(node.id) is None:
            self.error(node.pos, node.id, UndefinedIdentifierError)

    @_(ast.Literal)
    def visit(self, node, scope):
        pass

    @_(ast.Call)
    def visit(self, node, scope):
        self.visit(node.id, scope)
        for arg in node.args:
            self.visit(arg, scope)

    def constructor_of(self, instance, scope):
        constructor = scope.get(instance.id.id)
        if not isinstance(constructor, Constructor):
            self.error(instance.pos or instance.id.pos, instance.id.id, NotATypeError)

        declared = len(constructor.instance.values)
        if len(instance.values) > declared:
            self.error(
                instance.pos,
                f"'{instance.id.id}' has {declared} field(s), got {len(instance.values)}",
                ArityError)
        return constructor

    @_(ast.Match)
    def visit(self, node, scope):
        self.visit(node.id, scope)

        if not node.expressions:
            self.error(node.pos, "empty match", EmptyMatchError)

        constructors = [self.constructor_of(e.typeinstance, scope) for e in node.expressions]
        last = constructors[-1]

        if any(c.type is not last.type for c in constructors):
            self.error(node.pos, "cannot match against conflicting types", ConflictingTypesError)

        node.complete = len({c.value for c in constructors}) == last.length

        target = scope.get(node.id.id)
        if isinstance(target, ast.Member):
            parent = f"{target.parent}.{target.prop}"
        else:
            parent = node.id.id

        for expr in node.expressions:
            self.visit_arm(expr, scope, parent)

    def visit_arm(self, node, parent, target):
        node.scope = parent.child()

        for i, value in enumerate(node.typeinstance.values):
            self.bind(node.scope, value, ast.Member(parent=target, prop=ast.field_label(i)))

        self.visit(node.expression, node.scope)


def analyse(node, filename=None, text=None):
    return AnalyseVisitor(filename, text).analyse(node)

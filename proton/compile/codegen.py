import json
import logging
import re
from typing import NamedTuple
from .analyse import analyse
from .buffer import Buffer
from .visit import Visitor
from . import ast

logger = logging.getLogger(__name__)

HYPHENATED = re.compile(r'-(\w)')


def camel_case(name):
    return HYPHENATED.sub(lambda m: m.group(1).upper(), name)


class Output(NamedTuple):
    code: str
    map: str


class CodegenVisitor(Visitor):

    def visit_list(self, nodes, buffer, scope, separator=', '):
        if not nodes:
            return
        for node in nodes:
            self.visit(node, buffer, scope)
            buffer.push(separator)
        buffer.pop()

    @_(ast.File)
    def visit(self, node, buffer, scope, prefix=''):
        for top in node.body:
            if isinstance(top, (ast.Data, ast.Export)):
                continue
            self.visit(top, buffer, scope)
            buffer.push('\n')

    @_(ast.Literal)
    def visit(self, node, buffer, scope, prefix=''):
        buffer.put(prefix + json.dumps(node.value, ensure_ascii=False), node.pos)

    @_(ast.Identifier)
    def visit(self, node, buffer, scope, prefix=''):
        binding = scope.get(node.id)
        if isinstance(binding, ast.Member):
            self.visit(binding, buffer, scope, prefix, node.pos)
        else:
            buffer.put(prefix + camel_case(node.id), node.pos, node.id)

    @_(ast.Member)
    def visit(self, node, buffer, scope, prefix='', pos=None):
        buffer.put(f"{prefix}{camel_case(node.parent)}.{node.prop}", pos or node.pos)

    @_(ast.Call)
    def visit(self, node, buffer, scope, prefix=''):
        self.visit(node.id, buffer, scope, prefix)
        buffer.push('(')
        self.visit_list(node.args, buffer, scope)
        buffer.push(')')

    @_(ast.Import)
    def visit(self, node, buffer, scope, prefix=''):
        buffer.put('import { ', node.pos)
        self.visit_list(node.imports, buffer, scope)
        buffer.put(' } from ', node.pos)
        self.visit(node.path, buffer, scope)
        buffer.put(';', node.pos)

    @_(ast.Function)
    def visit(self, node, buffer, scope, prefix=''):
        scope = node.scope

        buffer.put('function ', node.pos)
        self.visit(node.id, buffer, scope)
        buffer.put('(', node.pos)
        self.visit_list(node.args, buffer, scope)

        buffer.indent()
        buffer.put(') {\n', node.pos)
        self.visit(node.body, buffer, scope, 'return ')
        if not isinstance(node.body, ast.Match):
            buffer.push(';')
        buffer.dedent()
        buffer.put('\n}', node.pos)

    @_(ast.Match)
    def visit(self, node, buffer, scope, prefix=''):
        buffer.indent()
        buffer.put('switch (', node.pos)
        self.visit(node.id, buffer, scope)
        buffer.put('.type) {')

        for expr in node.expressions:
            buffer.put('\n', node.pos)
            self.visit(expr, buffer, scope, prefix)

        if not node.complete:
            buffer.put('\n', node.pos)
            buffer.put("default: throw new Error('No match!');", node.pos)

        buffer.dedent()
        buffer.put('\n}', node.pos)

    @_(ast.MatchExpr)
    def visit(self, node, buffer, scope, prefix=''):
        buffer.put('case ', node.pos)

        constructor = scope.get(node.typeinstance.id.id)
        buffer.put(str(constructor.value), node.typeinstance.pos)

        buffer.indent()
        buffer.put(':\n', node.pos)
        self.visit(node.expression, buffer, node.scope, prefix)
        buffer.put(';', node.pos)

        # fall-through is only impossible after a return
        if prefix != 'return ':
            buffer.push('break;')

        buffer.dedent()

    @_(ast.Type)
    def visit(self, node, buffer, scope, prefix=''):
        labels = [ast.field_label(i) for i in range(node.values)]

        buffer.indent()
        buffer.put('function ', node.pos)
        self.visit(node.id, buffer, scope)
        buffer.put('(type', node.pos)
        for label in labels:
            buffer.push(',' + label)

        buffer.put(') {\nthis.type = type;', node.pos)
        for label in labels:
            buffer.push(f'\nthis.{label} = {label};')

        buffer.dedent()
        buffer.put('\n}\n', node.pos)


def generate(node, filename=None, text=None):
    analysis = analyse(node, filename, text)
    buffer = Buffer(filename)
    CodegenVisitor(filename, text).visit(node, buffer, analysis.scope)
    logger.debug("generated %d line(s) for %s", buffer.line, filename)
    return Output(buffer.code(), str(buffer.map))

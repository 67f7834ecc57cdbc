import logging
from .ast import (
    Call, Data, File, Function, Identifier, Import, Literal, Match, MatchExpr,
    Type, TypeInstance)
from .error import Error, ParseError
from .lexer import (
    EOF, Id, Indent, Punc, tokenize,
    KIND_ARROW, KIND_LEFT_PARENS, KIND_RIGHT_PARENS)
from . import lexer
from .location import LineIndex, Position

logger = logging.getLogger(__name__)


def is_punc(tok, kind):
    return isinstance(tok, Punc) and tok.kind == kind


class Parser(Error):

    def __init__(self, text, filename='<string source>', location=False):
        self.filename = filename
        self.text = text
        self.location = location
        self.tokens = tokenize(text, locations=True, source=filename)
        self.index = 0

    def position(self, first):
        if not self.location:
            return None

        start = first.pos
        last = self.prev().pos
        return Position(
            self.filename,
            start.start,
            last.end,
            (start.range[0], last.range[1]))

    def prev(self):
        return self.tokens[self.index - 1]

    def token(self):
        return self.tokens[self.index]

    def next(self):
        self.index += 1
        return self.tokens[self.index]

    def starts_line(self, tok):
        return tok.pos.start.column == 0

    def follows_directly(self, tok):
        return self.index > 0 and tok.pos.start.line == self.prev().pos.end.line + 1

    def blank_line(self):
        tok = self.token()
        if not isinstance(tok, Indent):
            return False
        following = self.tokens[self.index + 1]
        return following is EOF or following.pos.start.line > tok.pos.start.line

    def fail(self, msg):
        tok = self.token()
        pos = tok.pos
        if tok is EOF:
            end = len(self.text)
            pos = LineIndex(self.text).span(self.filename, end, end)
        self.error(pos, msg, ParseError)

    def eat_identifier(self, name):
        tok = self.token()

        if not isinstance(tok, Id):
            self.fail(f"expected 'id' token, got '{tok.type}' token")

        if tok.name != name:
            self.fail(f"expected '{name}', got '{tok.name}'")

        self.next()

    def parse(self):
        declarations = {
            'data': self.parse_data,
            'fn': self.parse_function,
            'import': self.parse_import,
            'type': self.parse_type,
        }
        body = []
        tok = self.token()

        while tok is not EOF:
            if self.blank_line():
                self.next()
            elif isinstance(tok, Id):
                if tok.name not in declarations:
                    self.fail(f"unexpected '{tok.name}'")
                body.append(declarations[tok.name]())
            else:
                self.fail(f"expected 'id' token at top-level, got '{tok.type}'")

            tok = self.token()

        logger.debug("parsed %d declarations from %s", len(body), self.filename)
        return File(body=body)

    def parse_data(self):
        tok = self.token()
        self.eat_identifier('data')
        id = self.parse_identifier()
        fields = self.parse_list()
        return Data(self.position(tok), id=id, fields=fields)

    def parse_function(self):
        tok = self.token()
        self.eat_identifier('fn')
        id = self.parse_identifier()
        args = self.parse_list()
        body = self.parse_expression()
        return Function(self.position(tok), id=id, args=args, body=body)

    def parse_import(self):
        tok = self.token()
        self.eat_identifier('import')
        path = self.parse_string()
        imports = self.parse_list()
        return Import(self.position(tok), path=path, imports=imports)

    def parse_type(self):
        tok = self.token()
        self.eat_identifier('type')
        id = self.parse_identifier()
        types = self.parse_list(self.parse_type_instance)
        return Type(self.position(tok), id=id, types=types)

    def parse_type_instance(self):
        tok = self.token()

        if is_punc(tok, KIND_LEFT_PARENS):
            items = self.parse_list()
            if not items:
                self.error(tok.pos, "expected constructor name", ParseError)
            return TypeInstance(self.position(tok), id=items[0], values=items[1:])

        id = self.parse_identifier()
        return TypeInstance(self.position(tok), id=id, values=[])

    def parse_expression(self):
        tok = self.token()

        if isinstance(tok, Id) and tok.name == 'match':
            return self.parse_match()

        if isinstance(tok, lexer.Literal):
            return self.parse_literal()

        return self.parse_possible_call()

    def parse_match(self):
        tok = self.token()
        self.eat_identifier('match')
        id = self.parse_identifier()
        expressions = self.parse_list(self.parse_match_expression)
        return Match(self.position(tok), id=id, expressions=expressions)

    def parse_match_expression(self):
        tok = self.token()
        typeinstance = self.parse_type_instance()

        arrow = self.token()
        if not is_punc(arrow, KIND_ARROW):
            self.fail(f"expected 'arrow'; got '{arrow.type}'")
        self.next()

        expression = self.parse_expression()
        return MatchExpr(self.position(tok), typeinstance=typeinstance, expression=expression)

    def parse_string(self):
        return self.parse_literal()

    def parse_literal(self):
        tok = self.token()

        if not isinstance(tok, lexer.Literal):
            self.fail(f"expected 'literal' token, got '{tok.type}'")

        self.next()
        return Literal(self.position(tok), value=tok.value)

    def parse_identifier(self):
        tok = self.token()

        if not isinstance(tok, Id):
            self.fail(f"expected 'id' token; got '{tok.type}'")

        self.next()
        return Identifier(self.position(tok), id=tok.name)

    def parse_possible_call(self):
        tok = self.token()
        id = self.parse_identifier()

        if not self.continues_call(self.token()):
            return id

        args = []
        while self.continues_call(self.token(), literals=True):
            args.append(self.parse_expression())

        return Call(self.position(tok), id=id, args=args)

    def continues_call(self, tok, literals=False):
        kinds = (Id, lexer.Literal) if literals else Id
        return isinstance(tok, kinds) and not self.starts_line(tok)

    def parse_list(self, parse_item=None):
        parse_item = parse_item or self.parse_identifier
        tok = self.token()

        if not is_punc(tok, KIND_LEFT_PARENS):
            return self.parse_indented_list(parse_item)

        tok = self.next()
        items = []

        while not is_punc(tok, KIND_RIGHT_PARENS):
            items.append(parse_item())
            tok = self.token()

        self.next()
        return items

    def parse_indented_list(self, parse_item):
        tok = self.token()

        if not isinstance(tok, Indent) or self.blank_line():
            self.fail("expected list")

        indent = tok.size
        items = []

        while True:
            # eat the indent
            self.next()
            items.append(parse_item())

            tok = self.token()
            if (not isinstance(tok, Indent) or self.blank_line()
                    or tok.size < indent or not self.follows_directly(tok)):
                return items
            if tok.size != indent:
                self.fail("expected other indentation")


def parse(text, filename='<string source>', location=False):
    return Parser(text, filename, location).parse()

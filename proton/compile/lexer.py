from dataclasses import dataclass
from typing import Optional
import sly
from .error import Error, LexError
from .location import LineIndex, Position

QUOTES = '"\'`'

KIND_LEFT_PARENS = 'left-parens'
KIND_RIGHT_PARENS = 'right-parens'
KIND_ARROW = 'arrow'


@dataclass(frozen=True)
class Id:
    name: str
    pos: Optional[Position] = None
    type = 'id'


@dataclass(frozen=True)
class Indent:
    size: int
    pos: Optional[Position] = None
    type = 'indent'


@dataclass(frozen=True)
class Punc:
    kind: str
    pos: Optional[Position] = None
    type = 'punc'


@dataclass(frozen=True)
class Literal:
    value: str
    pos: Optional[Position] = None
    type = 'literal'


class EndOfFile:
    type = 'eof'
    pos = None

    def __repr__(self):
        return 'EOF'


EOF = EndOfFile()


def arrow(pos=None):
    return Punc(KIND_ARROW, pos)


class Lexer(Error, sly.Lexer):

    tokens = {
        ARROW,
        ID,
        INDENT,
        STRING,
    }

    literals = {"(", ")"}

    ARROW = r'->'
    ID = r'(?:[A-Za-z]|-(?!>))+'
    STRING = r'"[^"]*"|\'[^\']*\'|`[^`]*`'

    @_(r'[ \t]+')
    def INDENT(self, t):
        if t.index > 0 and self.text[t.index - 1] not in '\r\n':
            return None
        return t

    ignore_newline = r'\n\r?|\r\n?'

    def __init__(self, filename=None, text=None):
        super().__init__()
        self.filename = filename
        self.text = text

    def error(self, t):
        char = t.value[0]
        pos = LineIndex(self.text).span(self.filename, t.index, t.index + 1)
        if char in QUOTES:
            msg = "unexpected EOF"
        else:
            msg = f"unexpected character {char!r}"
        raise LexError(msg, pos, char, self.line_of(pos))


def make_token(t, pos):
    if t.type == 'ID':
        return Id(t.value, pos)
    if t.type == 'ARROW':
        return arrow(pos)
    if t.type == 'STRING':
        return Literal(t.value[1:-1], pos)
    if t.type == 'INDENT':
        return Indent(len(t.value), pos)
    return Punc(KIND_LEFT_PARENS if t.value == '(' else KIND_RIGHT_PARENS, pos)


def tokenize(text, locations=False, source=None):
    lexer = Lexer(source, text)
    lines = LineIndex(text) if locations else None
    tokens = []

    for t in lexer.tokenize(text):
        pos = None
        if lines is not None:
            pos = lines.span(source, t.index, t.index + len(t.value))
        tokens.append(make_token(t, pos))

    tokens.append(EOF)
    return tokens

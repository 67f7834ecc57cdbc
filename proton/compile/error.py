from .location import LineIndex


class CompileError(SyntaxError):

    def __init__(self, message, pos=None, line=None):
        self.message = message
        self.pos = pos
        if pos is None:
            super().__init__(message)
            return

        start, end = pos.start, pos.end
        super().__init__(
            message,
            ( pos.source,
              start.line,
              start.column + 1,
              line,
              end.line,
              end.column + 1
            ))

    @property
    def location(self):
        if self.pos is None:
            return 'unknown'
        return f'{self.pos.source} ({self.pos.start.line}:{self.pos.start.column})'


class LexError(CompileError):

    def __init__(self, message, pos, char, line=None):
        super().__init__(message, pos, line)
        self.line = pos.start.line
        self.column = pos.start.column
        self.char = char


class ParseError(CompileError):
    pass


class DuplicateBindingError(CompileError):

    def __init__(self, name, pos=None, line=None):
        super().__init__(f"'{name}' is already defined", pos, line)
        self.name = name


class UndefinedIdentifierError(CompileError):

    def __init__(self, name, pos=None, line=None):
        super().__init__(f"references undefined identifier '{name}'", pos, line)
        self.name = name


class EmptyMatchError(CompileError):
    pass


class NotATypeError(CompileError):

    def __init__(self, name, pos=None, line=None):
        super().__init__(f"'{name}' is not a type", pos, line)
        self.name = name


class ConflictingTypesError(CompileError):
    pass


class ArityError(CompileError):
    pass


class Error:
    filename = None
    text = None

    def line_of(self, pos):
        if pos is None or self.text is None:
            return None
        return LineIndex(self.text).line_text(pos.start.line)

    def error(self, pos, msg, cls=ParseError):
        raise cls(msg, pos, self.line_of(pos))

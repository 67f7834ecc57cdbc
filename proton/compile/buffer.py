from .sourcemap import SourceMap

INDENT = '  '


class Buffer:
    """Accumulates generated code while tracking the generated cursor.

    `put` records a source map mapping from the cursor to the original
    position before appending; `push` only appends.
    """

    def __init__(self, filename=None):
        self.fragments = []
        self.line = 1
        self.column = 0
        self.last_position = (self.line, self.column)
        self.indent_string = '\n'
        self.map = SourceMap()
        if filename is not None:
            self.map.add_source(filename)

    def put(self, text, pos=None, name=None):
        if pos is not None:
            self.map.add_mapping(
                (self.line, self.column),
                (pos.start.line, pos.start.column),
                pos.source,
                name)
        self.push(text)

    def push(self, text):
        self.last_position = (self.line, self.column)
        text = text.replace('\n', self.indent_string)

        i = 0
        while i < len(text):
            if text[i] == '\n':
                if text[i + 1:i + 2] == '\r':
                    i += 1
                self.line += 1
                self.column = 0
            else:
                self.column += 1
            i += 1

        self.fragments.append(text)

    def pop(self):
        self.fragments.pop()
        self.line, self.column = self.last_position

    def indent(self):
        self.indent_string += INDENT

    def dedent(self):
        self.indent_string = self.indent_string[:-len(INDENT)]

    def code(self):
        return ''.join(self.fragments)

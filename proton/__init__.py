from .compile import transpile, tokenize, parse, analyse, generate, Output
from .compile.scope import Scope
from .compile.error import (
    CompileError, LexError, ParseError, DuplicateBindingError,
    UndefinedIdentifierError, EmptyMatchError, NotATypeError,
    ConflictingTypesError, ArityError)

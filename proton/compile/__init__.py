import logging
from .lexer import tokenize
from .parse import parse
from .analyse import analyse
from .codegen import generate, Output
from .error import CompileError

logger = logging.getLogger(__name__)


def transpile(text, filename='<string source>', loc=False):
    try:
        node = parse(text, filename, location=loc)
        logger.debug("parsed %s", filename)
        return generate(node, filename, text)
    except CompileError as e:
        raise e.with_traceback(None)

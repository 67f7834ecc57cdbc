import argparse
import logging
import os
import sys
import traceback
from .compile import transpile
from .compile.error import CompileError

logger = logging.getLogger(__name__)

USAGE = """\
ptc - Proton compiler
Usage: ptc <source.ptn> [target.js]"""


def make_parser():
    parser = argparse.ArgumentParser(prog='ptc')
    parser.add_argument('source', nargs='?')
    parser.add_argument('target', nargs='?')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def main(argv=None):
    args = make_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')

    if not args.source:
        print(USAGE)
        return 0

    target = args.target or os.path.splitext(args.source)[0] + '.js'

    with open(args.source, encoding='utf-8') as f:
        text = f.read()

    try:
        output = transpile(text, filename=args.source, loc=True)
    except CompileError as e:
        traceback.print_exception(type(e), e, None)
        return 1

    with open(target, 'w', encoding='utf-8') as f:
        f.write(output.code)
    with open(target + '.map', 'w', encoding='utf-8') as f:
        f.write(output.map)

    logger.debug("wrote %s", target)
    return 0


if __name__ == '__main__':
    sys.exit(main())

import argparse
import logging
import sys

from . import base
from . import data
from . import errors
from .hash_algorithm import HashAlgorithm
from .object_type import ObjectType

logger = logging.getLogger(__name__)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    with data.change_defaults(args.hash_algorithm, args.object_type):
        return args.func(args) or 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='gitoid')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-a', '--hash-algorithm', choices=[a.value for a in HashAlgorithm],
                        help=f'default: {data.get_defaults().hash_algorithm}')
    parser.add_argument('-t', '--object-type', choices=[t.value for t in ObjectType],
                        help=f'default: {data.get_defaults().object_type}')
    commands = parser.add_subparsers(dest='command')
    commands.required = True

    hash_object_parser = commands.add_parser('hash-object')
    hash_object_parser.set_defaults(func=hash_object)
    hash_object_parser.add_argument('file', help="path to read, or '-' for stdin")

    hash_string_parser = commands.add_parser('hash-string')
    hash_string_parser.set_defaults(func=hash_string)
    hash_string_parser.add_argument('text')

    parse_parser = commands.add_parser('parse')
    parse_parser.set_defaults(func=parse)
    parse_parser.add_argument('url')

    return parser.parse_args(argv)


def hash_object(args):
    try:
        if args.file == '-':
            content = sys.stdin.buffer.read()
        else:
            with open(args.file, 'rb') as f:
                content = f.read()
    except OSError as e:
        logger.debug('could not read %r', args.file)
        print(f'error: {e}', file=sys.stderr)
        return 1
    print(base.from_content_bytes(None, None, content))


def hash_string(args):
    print(base.from_content_string(None, None, args.text))


def parse(args):
    try:
        gitoid = base.from_url(args.url)
    except errors.GitOidError as e:
        logger.debug('could not parse %r', args.url)
        print(f'error: {e}', file=sys.stderr)
        return 1

    print(f'object type:    {gitoid.object_type_name()}')
    print(f'hash algorithm: {gitoid.algorithm_name()}')
    print(f'digest length:  {gitoid.digest_length()}')
    print(f'digest:         {gitoid.hex()}')

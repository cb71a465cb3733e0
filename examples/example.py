
import sys
import logging

from justargs import Parser, SwitchRegistry, ArgumentSyntaxError


REGISTRY = SwitchRegistry(short_options={'o': 'output'},
                          long_options={'output': 'output', 'exclude': 'exclude'},
                          short_positive_flags={'v': 'verbose', 'r': 'recursive'},
                          long_positive_flags={'verbose': 'verbose', 'recursive': 'recursive'},
                          short_negative_flags={'V': 'verbose'},
                          long_negative_flags={'quiet': 'verbose'})

PARSER = Parser(REGISTRY, max_posargs=1)


def copy_files(src, dests, output, excludes, verbose, recursive):
    for dest in dests:
        print('copy %s -> %s (recursive=%s, exclude=%r)' % (src, dest, recursive, excludes))
    if verbose:
        print('writing report to %s' % output)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = PARSER.parse(argv)
    except ArgumentSyntaxError as ase:
        print('error: %s' % ase, file=sys.stderr)
        return 2
    if not args.posargs:
        print('error: expected a source path', file=sys.stderr)
        return 2

    if args.get_flag('verbose'):
        logging.basicConfig(level=logging.DEBUG)

    copy_files(args.posargs[0], args.overflow_posargs,
               output=args.get_option('output', '-'),
               excludes=args.options.get('exclude', ()),
               verbose=args.get_flag('verbose', False),
               recursive=args.get_flag('recursive', False))
    return 0


if __name__ == '__main__':
    sys.exit(main())

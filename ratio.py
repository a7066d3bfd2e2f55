#!/usr/bin/env python3

import logging
import argparse

from rawfrac.frac import F, norm, norm_all


OPERATIONS = {
    '+': F.add,
    '-': F.sub,
    'x': F.mul,
    '/': F.div,
}


def run_reduce(fracs):
    return [x.reduce() for x in fracs]


def run_norm(x, y):
    return list(norm(x, y))


def run_norm_to(x, y):
    return [x.norm_to(y)]


def run_align(fracs):
    return norm_all(fracs)


def run_calc(x, op, y, reduce=False):
    result = OPERATIONS[op](x, y)
    logging.info('%s %s %s = %s', x, op, y, result)
    if reduce:
        result = result.reduce()
    return [result]


def run_command(args):
    if args.command == 'reduce':
        return run_reduce(args.fracs)
    elif args.command == 'norm':
        return run_norm(args.x, args.y)
    elif args.command == 'norm-to':
        return run_norm_to(args.x, args.y)
    elif args.command == 'align':
        return run_align(args.fracs)
    elif args.command == 'calc':
        return run_calc(args.x, args.op, args.y, reduce=args.reduce)
    raise ValueError("Unknown command: {}".format(args.command))


def get_argparser():
    argparser = argparse.ArgumentParser(
        description='Exact ratio arithmetic, fractions are given as "n/d" or "n".',
        epilog='Put "--" before negative fractions, e.g.: ratio.py reduce -- -6/4',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    argparser.add_argument('--verbose', '-v', action='count', default=0, help='loglevel (0=warning, 1=info, 2=debug)')
    commands = argparser.add_subparsers(dest='command', required=True)

    cmd = commands.add_parser('reduce', help='lowest terms')
    cmd.add_argument('fracs', type=F.parse, nargs='+')

    cmd = commands.add_parser('norm', help='bidirectional normalization of two fractions')
    cmd.add_argument('x', type=F.parse)
    cmd.add_argument('y', type=F.parse)

    cmd = commands.add_parser('norm-to', help='scale first fraction to a multiple of the second denominator')
    cmd.add_argument('x', type=F.parse)
    cmd.add_argument('y', type=F.parse)

    cmd = commands.add_parser('align', help='reduce fractions and put them on the least common denominator')
    cmd.add_argument('fracs', type=F.parse, nargs='+')

    cmd = commands.add_parser('calc', help='single arithmetic operation, not reduced by default')
    cmd.add_argument('x', type=F.parse)
    cmd.add_argument('op', choices=list(OPERATIONS))
    cmd.add_argument('y', type=F.parse)
    cmd.add_argument('--reduce', action='store_true', help='reduce the result')

    return argparser


def main(argv=None):
    args = get_argparser().parse_args(argv)

    if args.verbose == 1:
        loglevel = logging.INFO
    elif args.verbose >= 2:
        loglevel = logging.DEBUG
    else:
        loglevel = logging.WARNING
    logging.basicConfig(
        level=loglevel,
        format='%(asctime)s:%(levelname)s:%(name)s:%(message)s',
    )
    logging.info('args: %s', args)  # call after loglevel is set!

    results = run_command(args)
    for result in results:
        if result.d == 0:
            logging.warning('zero denominator in result: %r', result)
        print(result)
    return results


if __name__ == "__main__":
    main()

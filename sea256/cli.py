"""
SEA-256 — Hash Tester CLI

Runs diffusion, avalanche, collision and preimage measurements against a
hash function and prints a report.

Usage:
    sea256-tester -i "hello world" -t 1000
    sea256-tester -r mypkg.myhash:digest -i "hello world" -t 1000 --json
"""

import argparse
import json
import logging
import random
import sys

from .harness import DEFAULT_TESTING_KEY, HashTester
from .loader import LoaderError, resolve_hash_function

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='sea256-tester',
        description='Statistical quality tests for keyed hash functions.')
    parser.add_argument('-r', '--module', default='sea256',
                        help='built-in hash name or module[:attr] locator (default: sea256)')
    parser.add_argument('-f', '--function', dest='function', default=None,
                        help='exported function name (default: "default", then "hash")')
    parser.add_argument('-i', '--hash-input', required=True,
                        help='input text used for diffusion and avalanche')
    parser.add_argument('-k', '--key', default=DEFAULT_TESTING_KEY.decode('utf-8'),
                        help='testing key (default: %(default)s)')
    parser.add_argument('-t', '--test-iteration', type=int, required=True,
                        help='trials / iterations / attempts per measurement')
    parser.add_argument('--seed', type=int, default=None,
                        help='seed the random source for reproducible results')
    parser.add_argument('--json', action='store_true',
                        help='print results as JSON')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='enable debug logging')
    return parser


def configure_logging(verbose=False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def format_report(results):
    diffusion = results['diffusion']
    avalanche = results['avalanche']
    collision = results['collision']
    preimage = results['preimage']
    lines = [
        "Statistics:",
        f"Average Diffusion: {diffusion * 100}%",
        f"Average avalanche: {avalanche.average}",
        f"Collisions: {collision.collisions}",
        f"Preimage result: {'found' if preimage.found else 'not found'} in {preimage.tries}",
    ]
    return "\n".join(lines)


def results_as_dict(results):
    return {
        'diffusion': results['diffusion'],
        'avalanche': results['avalanche'].as_dict(),
        'collision': results['collision'].as_dict(),
        'preimage': results['preimage'].as_dict(),
    }


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.test_iteration < 0:
        parser.error('--test-iteration must be non-negative')
    if not args.hash_input and args.test_iteration > 0:
        parser.error('--hash-input must not be empty')
    if not args.key:
        parser.error('--key must not be empty')

    try:
        hash_fn = resolve_hash_function(args.module, args.function)
    except LoaderError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    rng = random.Random(args.seed)
    tester = HashTester(hash_fn, args.key, rng=rng)
    data = args.hash_input.encode('utf-8')

    logger.debug("running %d iterations against %s", args.test_iteration, args.module)
    results = tester.run_all(data, args.test_iteration)

    if args.json:
        print(json.dumps(results_as_dict(results), indent=2))
    else:
        print(format_report(results))
    return 0


if __name__ == '__main__':
    sys.exit(main())

#!/usr/bin/python3

import argparse
import logging
import sys

from storedump import convert


def parse_args(argv):
    parser = argparse.ArgumentParser(
        prog="storedump",
        description="Dump the named maps of LMDB stores of CBOR values to YAML, "
                    "writing <STORE><SUFFIX> next to each store.")
    parser.add_argument("paths", nargs="+", metavar="STORE",
                        help="LMDB store file or directory")
    parser.add_argument("--suffix", default=convert.OUTPUT_SUFFIX,
                        help="output file suffix (default: %(default)s)")
    parser.add_argument("--no-lock", dest="lock", action="store_false",
                        help="do not use the LMDB lock file (read-only media)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log progress for each map")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    failed = 0
    for result in convert.convert_all(args.paths, suffix=args.suffix, lock=args.lock):
        if result.error is not None:
            failed += 1
            print("Failed: %s" % result.error, file=sys.stderr)
        else:
            print("Converted %s -> %s" % (result.path, result.output))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())

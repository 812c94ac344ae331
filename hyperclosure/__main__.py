import argparse
import logging
import sys

from hyperclosure.closure import ClosureTooLargeError, close_complex
from hyperclosure.simplicial_complex import InvalidSimplexError
from hyperclosure.tables import TableFormatError, load_complex, write_complex

logger = logging.getLogger("hyperclosure")


def build_parser():
    p = argparse.ArgumentParser(
        prog="hyperclosure",
        description="Close weighted simplex tables under taking faces and sum duplicate weights.")
    p.add_argument("tables", nargs="+", help="input tables: label columns then a frequency column")
    p.add_argument("--out", default="closed", help="output directory (default: %(default)s)")
    p.add_argument("--stem", default="complex", help="output file prefix (default: %(default)s)")
    p.add_argument("--sep", default=",", help="field delimiter (default: %(default)r)")
    p.add_argument("--weight-column", default=None,
                   help="name of the frequency column (default: last column)")
    p.add_argument("--max-faces", type=int, default=None,
                   help="refuse to run if the closure may exceed this many simplices")
    p.add_argument("--progress", action="store_true", help="show a progress bar per dimension")
    p.add_argument("-v", "--verbose", action="count", default=0)
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)
    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        sc = load_complex(args.tables, sep=args.sep, weight_column=args.weight_column)
        close_complex(sc, progress=args.progress, max_faces=args.max_faces)
    except (OSError, TableFormatError, InvalidSimplexError, ClosureTooLargeError) as e:
        logger.error("%s", e)
        return 1

    for dim in range(sc.max_dimension + 1):
        logger.info("dim %d: %d simplices", dim, sc.num_rows(dim))
    write_complex(sc, args.out, args.stem, sep=args.sep)
    return 0


if __name__ == "__main__":
    sys.exit(main())

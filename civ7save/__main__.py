import argparse
import json
import logging
import sys
from pathlib import Path

from civ7save.errors import Civ7SaveError
from civ7save.save import decode
from civ7save.simplify import simplify, summarize, to_jsonable

logger = logging.getLogger("civ7save")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="civ7save",
        description="Dump the contents of a .Civ7Save file as JSON")
    parser.add_argument("file", type=Path, help="save file to read")
    parser.add_argument("--summary", action="store_true",
                        help="only print turn, age and players")
    parser.add_argument("--group", type=int, choices=range(1, 6), metavar="N",
                        help="only print top level group N (1-5)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log decoding progress")
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s",
                        level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        save = decode(args.file.read_bytes())
    except Civ7SaveError as e:
        logger.error(f"{args.file}: {e}")
        return 1

    if args.summary:
        output = summarize(save)
    else:
        groups = save.raw.groups
        chunks = groups[args.group - 1] if args.group else save.raw.all_chunks
        output = to_jsonable(simplify(chunks))

    json.dump(output, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

import argparse
import logging
from typing import Optional

from cel_tools import CelImage, Palette
from cel_tools.api.pil_io import make_sheet
from cel_tools.version import __version__

try:
    from IPython.lib.pretty import pprint
except ImportError:
    from pprint import pprint

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="cel-tools command line utility.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--cl2",
        action="store_true",
        default=None,
        help="Read the input as CL2 regardless of its extension",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    export_parser = subparsers.add_parser(
        "export", parents=[common], help="Export a frame or all frames as PNG"
    )
    export_parser.add_argument(
        "input_file",
        help="Input CEL/CL2 file (optionally with frame index, e.g. file.cel[0])",
    )
    export_parser.add_argument("output_file", help="Output image file")
    export_parser.add_argument(
        "-p", "--palette", help="Palette file of 256 RGB triples (default: grayscale)"
    )
    export_parser.add_argument(
        "--columns",
        type=int,
        default=8,
        help="Frames per row when exporting all frames [default: 8]",
    )

    show_parser = subparsers.add_parser(
        "show", parents=[common], help="Show the frames and their encodings"
    )
    show_parser.add_argument("input_file", help="Input CEL/CL2 file")

    debug_parser = subparsers.add_parser(
        "debug", parents=[common], help="Show the raw frame index"
    )
    debug_parser.add_argument("input_file", help="Input CEL/CL2 file")

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    if args.verbose:
        logging.getLogger("cel_tools").setLevel(logging.DEBUG)
    else:
        logging.getLogger("cel_tools").setLevel(logging.INFO)

    input_parts = args.input_file.split("[")
    input_file = input_parts[0]
    try:
        cel = CelImage.open(input_file, headered=args.cl2)

        if args.command == "export":
            palette = Palette.open(args.palette) if args.palette else Palette.grayscale()
            if len(input_parts) > 1:
                index = int(input_parts[1].rstrip("]"))
                image = cel.topil(index, palette)
            else:
                image = make_sheet(list(cel.frames(palette)), args.columns)
            image.save(args.output_file)

        elif args.command == "show":
            pprint(cel)

        elif args.command == "debug":
            pprint(cel._record)
    except (IndexError, ValueError) as e:
        logger.error(str(e))
        return 1

    return None


if __name__ == "__main__":
    main()

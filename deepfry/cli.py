"""Command line interface: deepfry an image file with one mode or a preset."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

from PIL import Image

from deepfry.core import U32_MAX, BitChange, ChangeMode, Preset, deepfry

_DIGITS = re.compile(r"\+?[0-9]+")


def _kebab(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", name).lower()


_MODES = {_kebab(mode.value): mode for mode in ChangeMode}


def parse_shift_value(s: str) -> int:
    """Parse a channel operand, which must lie between 0 and 2**32 - 1."""
    if not _DIGITS.fullmatch(s):
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {s!r}")
    value = int(s)
    if value > U32_MAX:
        raise argparse.ArgumentTypeError(f"exceeds maximum of {U32_MAX}")
    return value


def _parse_mode(s: str) -> ChangeMode:
    try:
        return _MODES[s]
    except KeyError:
        choices = ", ".join(_MODES)
        raise argparse.ArgumentTypeError(
            f"invalid value '{s}' (possible values: {choices})"
        ) from None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deepfry",
        description="Deepfry - A tool for deepfrying images.",
    )
    parser.add_argument("input", type=Path, help="The input file.")
    parser.add_argument("output", type=Path, help="The output file.")
    parser.add_argument(
        "-r", dest="red", metavar="red", type=parse_shift_value, default=1,
        help="The red shift.",
    )
    parser.add_argument(
        "-g", dest="green", metavar="green", type=parse_shift_value, default=1,
        help="The green shift.",
    )
    parser.add_argument(
        "-b", dest="blue", metavar="blue", type=parse_shift_value, default=1,
        help="The blue shift.",
    )
    parser.add_argument(
        "-m", dest="mode", metavar="mode", type=_parse_mode, default=None,
        help=f"The bit changing mode ({', '.join(_MODES)}).",
    )
    parser.add_argument(
        "-p", dest="preset", metavar="preset", type=Path, default=None,
        help="The preset.",
    )
    return parser


def _fail(message: str) -> int:
    print(f"deepfry: {message}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.preset is None and args.mode is None:
        parser.error("no bit change mode or preset specified")

    try:
        with Image.open(args.input) as source:
            image = source.convert("RGB")
    except OSError as exc:
        return _fail(f"cannot open input image {args.input}: {exc}")

    if args.preset is not None:
        try:
            preset = Preset.from_toml(args.preset.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            return _fail(f"cannot read preset {args.preset}: {exc}")
        try:
            algorithms = [config.algo() for config in preset.algorithms]
        except ValueError as exc:
            return _fail(f"error while validating preset {exc}")
        for algo in algorithms:
            image = deepfry(image, algo)
    else:
        image = deepfry(image, BitChange(args.mode, args.red, args.green, args.blue))

    try:
        image.save(args.output)
    except (OSError, ValueError) as exc:
        return _fail(f"failed to save image: {exc}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
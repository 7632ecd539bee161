"""Command-line front end: print the darkened variant of a color.

Usage:
    python -m darkshade "#FFE4DF"
    python -m darkshade "rgb(120 200 90)" -f oklch --absolute-chroma
"""

from __future__ import annotations

import argparse
import logging

from darkshade import defaults
from darkshade.colorspace import format_color, parse_color
from darkshade.pipeline import transform
from darkshade.types import DarkshadeError, OutputFormat, TransformDiagnostics

logger = logging.getLogger(__name__)


def _log_diagnostics(diagnostics: TransformDiagnostics) -> None:
    if not diagnostics.ok:
        return
    logger.debug(
        "input=%s relative_chroma=%.3f (base %.3f) lightness=%.3f chroma=%.4f in_gamut=%s",
        diagnostics.input_color,
        diagnostics.relative_chroma,
        diagnostics.base_relative_chroma,
        diagnostics.lightness,
        diagnostics.unclamped_chroma,
        diagnostics.output_in_gamut,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="darkshade",
        description="Darken a color in OKLCH while keeping it inside sRGB.",
    )
    parser.add_argument(
        "color",
        nargs="?",
        default=defaults.DEFAULT_INPUT_COLOR,
        help=f"Input color: hex, rgb(), hsl(), oklch(), oklab() or a CSS name "
             f"(default: {defaults.DEFAULT_INPUT_COLOR})",
    )
    parser.add_argument(
        "-f", "--format",
        choices=[fmt.value for fmt in OutputFormat],
        default=defaults.DEFAULT_OUTPUT_FORMAT,
        help=f"Output format (default: {defaults.DEFAULT_OUTPUT_FORMAT})",
    )
    parser.add_argument(
        "--absolute-chroma",
        action="store_true",
        help="Only clip chroma at the new lightness instead of keeping relative chroma",
    )
    parser.add_argument(
        "--show-input",
        action="store_true",
        help="Also print the input color in the output format",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log intermediate values",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    result = transform(
        args.color,
        args.format,
        use_relative_chroma=not args.absolute_chroma,
        on_diagnostic=_log_diagnostics,
    )
    if result == defaults.INVALID_COLOR:
        print(result)
        return 1

    if args.show_input:
        try:
            original = format_color(parse_color(args.color), args.format)
        except DarkshadeError as exc:
            # transform() already accepted this input
            logger.error("Could not format input color: %s", exc)
            return 1
        print(f"input:  {original}")
        print(f"output: {result}")
    else:
        print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

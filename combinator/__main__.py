# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""
Command line entry point.

    python -m combinator --palette tundra --template light --level A \\
        --min-bg-contrast 1.4 --limit 20
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from combinator.combine.generate import GenerateOptions, generate_combinations
from combinator.combine.sequence import SequenceMode
from combinator.palettes import (
    PALETTE_NAMES,
    TemplateType,
    default_selection,
    get_palette,
    text_color_for_template,
)
from combinator.runtime import SerializerFormat, to_export, to_report
from combinator.schema import ContrastLevel

logger = logging.getLogger("combinator")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="combinator",
        description="Generate accessible two-tone background combinations from a palette",
    )
    parser.add_argument("--palette", choices=PALETTE_NAMES, default="tundra")
    parser.add_argument(
        "--select", nargs="*", metavar="ID",
        help="Color ids to use (default: the palette's default selection)",
    )
    parser.add_argument(
        "--template", choices=[t.value for t in TemplateType], default=TemplateType.LIGHT.value,
        help="light = black text, dark = white text",
    )
    parser.add_argument("--text-color", help="Explicit text color hex; overrides --template")
    parser.add_argument(
        "--level", choices=[lvl.value for lvl in ContrastLevel], default=ContrastLevel.A.value,
    )
    parser.add_argument("--min-bg-contrast", type=float, default=1.4)
    parser.add_argument("--min-hue", type=float, default=0.0, help="Minimum hue distance (0-180)")
    parser.add_argument("--min-sat", type=float, default=0.0, help="Minimum saturation distance (0-100)")
    parser.add_argument("--min-lum", type=float, default=0.0, help="Minimum lightness distance (0-100)")
    parser.add_argument("--diversity", type=float, default=0.0, help="Minimum pair distance (0 = off)")
    parser.add_argument("--no-diverse", action="store_true", help="Keep enumeration order")
    parser.add_argument("--exclude-inverse", action="store_true", help="Drop mirrored pairs")
    parser.add_argument("--fast", action="store_true", help="Nearest-neighbour sequencing")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--limit", type=int, default=0, help="Show at most N combinations")
    parser.add_argument(
        "--format", choices=[f.value for f in SerializerFormat], default=SerializerFormat.NATURAL.value,
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("-q", "--quiet", action="store_true")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.INFO,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    try:
        palette = get_palette(args.palette)
    except KeyError as exc:
        parser.error(str(exc))

    selected = set(args.select) if args.select else set(default_selection(args.palette))
    unknown = selected - {c.id for c in palette}
    if unknown:
        logger.warning("Ignoring %d unknown color ids: %s", len(unknown), ", ".join(sorted(unknown)))

    text_color = args.text_color or text_color_for_template(TemplateType(args.template))

    options = GenerateOptions(
        min_bg_contrast=args.min_bg_contrast,
        min_hue_distance=args.min_hue,
        min_sat_distance=args.min_sat,
        min_lum_distance=args.min_lum,
        min_total_distance=args.diversity,
        diverse_sort=not args.no_diverse,
        exclude_inverse=args.exclude_inverse,
        sequence_mode=SequenceMode.NEAREST if args.fast else SequenceMode.TIERED,
        max_results=max(0, args.limit),
    )

    try:
        result = generate_combinations(
            palette, selected, text_color, args.level, options=options, seed=args.seed,
        )
    except ValueError as exc:
        parser.error(str(exc))

    logger.info("%d combinations accepted from %d selected colors", result.total_count, len(selected))

    fmt = SerializerFormat(args.format)
    if fmt == SerializerFormat.NATURAL:
        output = to_report(result, text_color=text_color, describe=args.verbose)
    else:
        output = to_export(result, format=fmt)
    sys.stdout.write(output + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

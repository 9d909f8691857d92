# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""
JSON export serializer.

Formats a CombinationResult as a JSON document that other tools can
consume (design token generators, preview builders, test fixtures).
"""

from __future__ import annotations

import json

from combinator.runtime.serializers.base import SerializerFormat
from combinator.schema import CombinationResult


def to_export(
    result: CombinationResult,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    include_hsl: bool = False,
    compact: bool = False,
) -> str:
    """Serialize a CombinationResult as JSON.

    Args:
        result: The CombinationResult to serialize.
        format: JSON (compact separators) or JSON_PRETTY (indented).
        include_hsl: Include HSL values for both members.
        compact: Emit combinations as ``[c1_hex, c2_hex]`` pairs only and
            drop the contrast map.

    Returns:
        JSON string.

    Example (compact=True)::

        {
          "total_count": 2,
          "shown": 2,
          "combinations": [["#000000", "#FFFFFF"], ["#FFFFFF", "#000000"]]
        }
    """
    if format == SerializerFormat.NATURAL:
        raise ValueError("Export supports JSON formats only; use to_report for text")

    if compact:
        data = {
            "total_count": result.total_count,
            "shown": result.shown,
            "combinations": [
                [combo.c1.hex, combo.c2.hex] for combo in result.combinations
            ],
        }
    else:
        data = result.to_dict(include_hsl=include_hsl)

    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))

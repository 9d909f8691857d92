# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""
Output runtime for Combinator.

1. Export -- JSON document for tooling
2. Report -- plain-text listing for terminals and logs
"""

from combinator.runtime.serializers import (
    SerializerFormat,
    to_export,
    to_report,
)

__all__ = [
    "to_export",
    "to_report",
    "SerializerFormat",
]

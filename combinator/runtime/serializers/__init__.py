# Copyright (c) 2026 Combinator
# SPDX-License-Identifier: MIT

"""
Serializers for CombinationResult output.

Serializers only format a result; they never change membership or order.
"""

from combinator.runtime.serializers.base import SerializerFormat
from combinator.runtime.serializers.export import to_export
from combinator.runtime.serializers.report import to_report

__all__ = [
    "SerializerFormat",
    "to_export",
    "to_report",
]

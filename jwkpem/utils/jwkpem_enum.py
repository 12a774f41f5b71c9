#!/usr/bin/env python
# -*- coding: UTF-8 -*-
#
# Copyright 2025-2026 NXP
#
# SPDX-License-Identifier: BSD-3-Clause

"""Enumeration with tag, label and description members."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class JwkPemEnumMember:
    """JWKPEM Enum member representation.

    Holds the numeric tag, human-readable label and optional description of one
    enumeration value.
    """

    tag: int
    label: str
    description: Optional[str] = None


class JwkPemEnum(JwkPemEnumMember, Enum):
    """Enumeration compared by tag or label.

    A member equals its integer tag and its label.
    """

    def __eq__(self, __value: object) -> bool:
        """Check equality of enum value with another object.

        :param __value: Object to compare with this enum value.
        :return: True if the object equals tag or label, False otherwise.
        """
        return self.tag == __value or self.label == __value

    def __hash__(self) -> int:
        return hash((self.tag, self.label, self.description))

    @classmethod
    def labels(cls) -> list[str]:
        """Get list of labels of all enum members.

        :return: List of all labels.
        """
        return [value.label for value in cls.__members__.values()]

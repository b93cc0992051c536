from __future__ import annotations

"""
FIGfont smushing rules.

Every rule owns one bit of the packed layout integer found in a font header
(`full_layout`, or the legacy `old_layout`). Bits 1..128 describe horizontal
composition, 256..16384 vertical composition. Each rule is a pure pairwise
combiner: given the left/top char, the right/bottom char and the font's
hardblank it returns the merged char, or `None` when the rule does not apply.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, IntEnum


class LayoutAxis(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class LayoutMode(Enum):
    FULL_WIDTH = "full_width"
    FITTING = "fitting"
    CONTROLLED_SMUSH = "controlled_smush"
    UNIVERSAL_SMUSH = "universal_smush"


class SmushingRule(IntEnum):
    """Layout bits from the FIGfont header."""

    HORIZONTAL_EQUAL_CHAR = 1
    HORIZONTAL_UNDERSCORE = 2
    HORIZONTAL_HIERARCHY = 4
    HORIZONTAL_OPPOSITE_PAIR = 8
    HORIZONTAL_BIG_X = 16
    HORIZONTAL_HARDBLANK = 32
    HORIZONTAL_FITTING = 64
    HORIZONTAL_SMUSHING = 128
    VERTICAL_EQUAL_CHAR = 256
    VERTICAL_UNDERSCORE = 512
    VERTICAL_HIERARCHY = 1024
    VERTICAL_HORIZONTAL_LINE = 2048
    VERTICAL_VERTICAL_LINE = 4096
    VERTICAL_FITTING = 8192
    VERTICAL_SMUSHING = 16384

    @property
    def label(self) -> str:
        return self.name.lower()

    @property
    def axis(self) -> LayoutAxis:
        return RULE_SPECS[self].axis

    @property
    def mode(self) -> LayoutMode:
        return RULE_SPECS[self].mode

    def combine(self, char_a: str, char_b: str, hardblank: str) -> str | None:
        return _COMBINERS[self](char_a, char_b, hardblank)


@dataclass(frozen=True, slots=True)
class RuleSpec:
    priority: int
    axis: LayoutAxis
    mode: LayoutMode
    rule: SmushingRule


_H = LayoutAxis.HORIZONTAL
_V = LayoutAxis.VERTICAL
_CONTROLLED = LayoutMode.CONTROLLED_SMUSH

# Highest priority first; the layout decoder walks this order.
# 16384 is the vertical counterpart of 128 and classifies the same way.
RULE_TABLE: tuple[RuleSpec, ...] = (
    RuleSpec(16384, _V, LayoutMode.UNIVERSAL_SMUSH, SmushingRule.VERTICAL_SMUSHING),
    RuleSpec(8192, _V, LayoutMode.FITTING, SmushingRule.VERTICAL_FITTING),
    RuleSpec(4096, _V, _CONTROLLED, SmushingRule.VERTICAL_VERTICAL_LINE),
    RuleSpec(2048, _V, _CONTROLLED, SmushingRule.VERTICAL_HORIZONTAL_LINE),
    RuleSpec(1024, _V, _CONTROLLED, SmushingRule.VERTICAL_HIERARCHY),
    RuleSpec(512, _V, _CONTROLLED, SmushingRule.VERTICAL_UNDERSCORE),
    RuleSpec(256, _V, _CONTROLLED, SmushingRule.VERTICAL_EQUAL_CHAR),
    RuleSpec(128, _H, LayoutMode.UNIVERSAL_SMUSH, SmushingRule.HORIZONTAL_SMUSHING),
    RuleSpec(64, _H, LayoutMode.FITTING, SmushingRule.HORIZONTAL_FITTING),
    RuleSpec(32, _H, _CONTROLLED, SmushingRule.HORIZONTAL_HARDBLANK),
    RuleSpec(16, _H, _CONTROLLED, SmushingRule.HORIZONTAL_BIG_X),
    RuleSpec(8, _H, _CONTROLLED, SmushingRule.HORIZONTAL_OPPOSITE_PAIR),
    RuleSpec(4, _H, _CONTROLLED, SmushingRule.HORIZONTAL_HIERARCHY),
    RuleSpec(2, _H, _CONTROLLED, SmushingRule.HORIZONTAL_UNDERSCORE),
    RuleSpec(1, _H, _CONTROLLED, SmushingRule.HORIZONTAL_EQUAL_CHAR),
)

RULE_SPECS: dict[SmushingRule, RuleSpec] = {spec.rule: spec for spec in RULE_TABLE}

UNDERSCORE_PARTNERS = "|/\\[]{}()<>"
# Classes are separated by spaces; a later class beats an earlier one.
HIERARCHY_CLASSES = "| /\\ [] {} () <>"
OPPOSITE_PAIRS = "[] {} ()"


def _class_position(classes: str, char: str) -> int | None:
    if char == " ":
        return None
    pos = classes.find(char)
    if pos < 0:
        return None
    return pos


def _equal_char(a: str, b: str, hardblank: str) -> str | None:
    if a == b and a != hardblank:
        return a
    return None


def _underscore(a: str, b: str, hardblank: str) -> str | None:
    if a == "_" and b in UNDERSCORE_PARTNERS:
        return b
    if b == "_" and a in UNDERSCORE_PARTNERS:
        return a
    return None


def _hierarchy(a: str, b: str, hardblank: str) -> str | None:
    pos_a = _class_position(HIERARCHY_CLASSES, a)
    pos_b = _class_position(HIERARCHY_CLASSES, b)
    if pos_a is None or pos_b is None:
        return None
    if pos_a == pos_b or abs(pos_a - pos_b) == 1:
        return None
    return HIERARCHY_CLASSES[max(pos_a, pos_b)]


def _opposite_pair(a: str, b: str, hardblank: str) -> str | None:
    pos_a = _class_position(OPPOSITE_PAIRS, a)
    pos_b = _class_position(OPPOSITE_PAIRS, b)
    if pos_a is None or pos_b is None:
        return None
    if abs(pos_a - pos_b) == 1:
        return "|"
    return None


_BIG_X = {
    ("/", "\\"): "|",
    ("\\", "/"): "Y",
    (">", "<"): "X",
}


def _big_x(a: str, b: str, hardblank: str) -> str | None:
    return _BIG_X.get((a, b))


def _hardblank(a: str, b: str, hardblank: str) -> str | None:
    if a == hardblank and b == hardblank:
        return hardblank
    return None


def _fitting(a: str, b: str, hardblank: str) -> str | None:
    if a == " " and b == " ":
        return " "
    return None


def _smushing(a: str, b: str, hardblank: str) -> str | None:
    if a != hardblank and b != hardblank:
        return b
    return None


def _horizontal_line(a: str, b: str, hardblank: str) -> str | None:
    if (a, b) in (("-", "_"), ("_", "-")):
        return "="
    return None


def _vertical_line(a: str, b: str, hardblank: str) -> str | None:
    if a == "|" and b == "|":
        return "|"
    return None


_COMBINERS: dict[SmushingRule, Callable[[str, str, str], str | None]] = {
    SmushingRule.HORIZONTAL_EQUAL_CHAR: _equal_char,
    SmushingRule.HORIZONTAL_UNDERSCORE: _underscore,
    SmushingRule.HORIZONTAL_HIERARCHY: _hierarchy,
    SmushingRule.HORIZONTAL_OPPOSITE_PAIR: _opposite_pair,
    SmushingRule.HORIZONTAL_BIG_X: _big_x,
    SmushingRule.HORIZONTAL_HARDBLANK: _hardblank,
    SmushingRule.HORIZONTAL_FITTING: _fitting,
    SmushingRule.HORIZONTAL_SMUSHING: _smushing,
    SmushingRule.VERTICAL_EQUAL_CHAR: _equal_char,
    SmushingRule.VERTICAL_UNDERSCORE: _underscore,
    SmushingRule.VERTICAL_HIERARCHY: _hierarchy,
    SmushingRule.VERTICAL_HORIZONTAL_LINE: _horizontal_line,
    SmushingRule.VERTICAL_VERTICAL_LINE: _vertical_line,
    SmushingRule.VERTICAL_FITTING: _fitting,
    SmushingRule.VERTICAL_SMUSHING: _smushing,
}


__all__ = [
    "HIERARCHY_CLASSES",
    "LayoutAxis",
    "LayoutMode",
    "OPPOSITE_PAIRS",
    "RULE_SPECS",
    "RULE_TABLE",
    "RuleSpec",
    "SmushingRule",
    "UNDERSCORE_PARTNERS",
]

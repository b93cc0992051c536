from __future__ import annotations

from dataclasses import dataclass

from .layout import RULE_TABLE, LayoutAxis, LayoutMode, SmushingRule


@dataclass(frozen=True, slots=True)
class Rules:
    """Layout modes and active smushing rules for both axes, priority ordered."""

    horizontal_layout: LayoutMode
    vertical_layout: LayoutMode
    horizontal_rules: tuple[SmushingRule, ...]
    vertical_rules: tuple[SmushingRule, ...]

    def smushes_horizontal(self, char_a: str, char_b: str, hardblank: str) -> bool:
        """Return True when two visible chars may share one column."""
        if self.horizontal_layout is LayoutMode.UNIVERSAL_SMUSH:
            return SmushingRule.HORIZONTAL_SMUSHING.combine(char_a, char_b, hardblank) is not None
        for rule in self.horizontal_rules:
            if rule.mode is not LayoutMode.CONTROLLED_SMUSH:
                continue
            if rule.combine(char_a, char_b, hardblank) is not None:
                return True
        return False

    def smush_horizontal(self, char_a: str, char_b: str, hardblank: str) -> str | None:
        if char_a == " ":
            return char_b
        if char_b == " ":
            return char_a
        if self.horizontal_layout is LayoutMode.UNIVERSAL_SMUSH:
            return SmushingRule.HORIZONTAL_SMUSHING.combine(char_a, char_b, hardblank)
        for rule in self.horizontal_rules:
            merged = rule.combine(char_a, char_b, hardblank)
            if merged is not None:
                return merged
        return None


def decode_layout(full_layout: int | None, old_layout: int) -> Rules:
    code = old_layout if full_layout is None else int(full_layout)

    horizontal_layout = LayoutMode.FULL_WIDTH
    vertical_layout = LayoutMode.FULL_WIDTH
    horizontal_rules: list[SmushingRule] = []
    vertical_rules: list[SmushingRule] = []

    for spec in RULE_TABLE:
        if spec.priority > code:
            continue
        code -= spec.priority
        if spec.axis is LayoutAxis.HORIZONTAL:
            horizontal_rules.append(spec.rule)
            horizontal_layout = spec.mode
        else:
            vertical_rules.append(spec.rule)
            vertical_layout = spec.mode

    if not horizontal_rules:
        if old_layout == 0:
            horizontal_layout = LayoutMode.FITTING
            # Legacy quirk: the fitting marker lands on the vertical list.
            vertical_rules.append(SmushingRule.HORIZONTAL_FITTING)
        elif old_layout == -1:
            horizontal_layout = LayoutMode.FULL_WIDTH
    elif horizontal_layout is LayoutMode.CONTROLLED_SMUSH:
        horizontal_rules = [rule for rule in horizontal_rules if rule is not SmushingRule.HORIZONTAL_SMUSHING]

    if not vertical_rules:
        vertical_layout = LayoutMode.FULL_WIDTH
    elif vertical_layout is LayoutMode.CONTROLLED_SMUSH:
        vertical_rules = [rule for rule in vertical_rules if rule is not SmushingRule.VERTICAL_SMUSHING]

    return Rules(
        horizontal_layout=horizontal_layout,
        vertical_layout=vertical_layout,
        horizontal_rules=tuple(horizontal_rules),
        vertical_rules=tuple(vertical_rules),
    )


__all__ = [
    "Rules",
    "decode_layout",
]

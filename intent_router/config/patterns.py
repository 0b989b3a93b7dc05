"""Ordered pattern families for the pattern tier.

Rules are evaluated in ``PATTERN_RULES`` order and the first family with a
matching pattern wins, so comparison phrasing always beats question phrasing.
"""

import re
from dataclasses import dataclass
from typing import Literal

PatternIntent = Literal["comparison", "question"]

# "X vs Y", "difference between X and Y", "which is better, X or Y"
COMPARISON_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"と.{1,10}(の)?違い"),
    re.compile(r"vs", re.IGNORECASE),
    re.compile(r"比べ"),
    re.compile(r"比較"),
    re.compile(r".{1,20}と.{1,20}どっち"),
    re.compile(r".{1,20}と.{1,20}どちら"),
)

QUESTION_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p)
    for p in (
        # Trailing question mark (full-width / half-width)
        r"？$",
        r"\?$",
        # Safety / side effects
        r"大丈夫",
        r"安全",
        r"危険",
        r"副作用",
        r"リスク",
        r"注意",
        # Asking for advice
        r"どう(です|でしょう|なの)?",
        r"何がいい",
        r"どれがいい",
        r"おすすめ",
        r"選び方",
        r"どっち",
        # Comparison vocabulary without an explicit pair
        r"違い",
        r"比較",
        r"どちら",
        # Efficacy
        r"効果(は|ある)?",
        r"効く",
        r"意味(は|ある)?",
        # Co-administration
        r"飲み合わせ",
        r"一緒に",
        r"併用",
        r"相互作用",
        # Conditional clauses; the wave dash is part of the pattern
        r"〜ても",
        r"〜でも",
        r"〜けど",
        r"〜だけど",
        r"〜が",
    )
)


@dataclass(frozen=True)
class PatternRule:
    """A pattern family tagged with the intent it signals."""

    intent: PatternIntent
    patterns: tuple[re.Pattern[str], ...]

    def matches(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.patterns)


PATTERN_RULES: tuple[PatternRule, ...] = (
    PatternRule(intent="comparison", patterns=COMPARISON_PATTERNS),
    PatternRule(intent="question", patterns=QUESTION_PATTERNS),
)

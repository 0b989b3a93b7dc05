from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from intent_router.inference.classification.context import QueryContext

# Full-width ASCII letters and digits; shifted by 0xFEE0 to their half-width form
FULL_WIDTH_ALNUM = re.compile(r"[Ａ-Ｚａ-ｚ０-９]")
FULL_WIDTH_OFFSET = 0xFEE0

WHITESPACE_RUN = re.compile(r"\s+")


def _to_half_width(match: re.Match[str]) -> str:
    return chr(ord(match.group()) - FULL_WIDTH_OFFSET)


def normalize(raw: str | None) -> str:
    """Canonicalize a raw query.

    Applies full-width to half-width folding for letters and digits,
    lower-casing, whitespace collapsing and trimming. The result is part of the
    public classification record and feeds cache keys, so this rule must stay
    stable. Idempotent.
    """
    if not raw:
        return ""

    text = FULL_WIDTH_ALNUM.sub(_to_half_width, raw)
    text = text.lower()
    text = WHITESPACE_RUN.sub(" ", text)
    return text.strip()


class TextCleaner:
    """Preprocessor that fills in the normalized query."""

    name = "text_cleaner"

    def process(self, ctx: QueryContext) -> None:
        ctx.normalized_input = normalize(ctx.raw_input)

import re
from typing import Any, Callable, Optional

from config.marketing_tables import CURRENCY_CODES, CURRENCY_SYMBOLS, DIALECT_TERMS, MONETARY_KEYS

_AMOUNT = r"\d[\d,]*(?:\.\d+)?"
_SYMBOL_CLASS = "[" + re.escape(CURRENCY_SYMBOLS) + "]"
_CODES = "|".join(CURRENCY_CODES)

# Applied in order; the bare symbol sweep comes last so no symbol survives.
MONETARY_PATTERNS = [
    (re.compile(_SYMBOL_CLASS + r"\s?" + _AMOUNT + r"(?:\s?(?:k|m|bn|million|billion)\b)?", re.IGNORECASE), ""),
    (re.compile(r"\b" + _AMOUNT + r"\s*(?:pounds?|dollars?|euros?|cents?|pence|quid|rupees?)\b", re.IGNORECASE), ""),
    (re.compile(r"\b(?:" + _CODES + r")\s?" + _AMOUNT + r"\b"), ""),
    (re.compile(r"\b" + _AMOUNT + r"\s?(?:" + _CODES + r")\b"), ""),
    (re.compile(r"\b(?:costs?|budgets?|spends?|prices?|fees?)\s*[:=]\s*(?![\d,.]*\s*%)" + _AMOUNT, re.IGNORECASE), ""),
    (re.compile(_SYMBOL_CLASS), ""),
    (re.compile(r"[ \t]{2,}"), " "),
]

DIALECT_PATTERN = re.compile(
    r"\b(" + "|".join(sorted(map(re.escape, DIALECT_TERMS), key=len, reverse=True)) + r")\b",
    re.IGNORECASE,
)


def walk_tree(
    node: Any,
    transform_text: Optional[Callable[[str], str]] = None,
    drop_key: Optional[Callable[[str], bool]] = None,
    transform_key: Optional[Callable[[str], str]] = None,
) -> Any:
    """
    Rebuild a JSON-like tree, dropping mapping keys for which `drop_key` is true
    and passing every string leaf through `transform_text`. Kept string keys go
    through `transform_key` when given. The input is left untouched.
    """
    if isinstance(node, dict):
        return {
            (transform_key(key) if transform_key and isinstance(key, str) else key):
                walk_tree(value, transform_text, drop_key, transform_key)
            for key, value in node.items()
            if not (drop_key and drop_key(key))
        }
    if isinstance(node, (list, tuple)):
        return [walk_tree(item, transform_text, drop_key, transform_key) for item in node]
    if isinstance(node, str) and transform_text:
        return transform_text(node)
    return node


def _match_case(source, replacement):
    if source.isupper() and len(source) > 1:
        return replacement.upper()
    if source[0].isupper():
        return replacement[0].upper() + replacement[1:]
    return replacement


def to_british_english(text: str, terms=DIALECT_TERMS) -> str:
    if terms is DIALECT_TERMS:
        pattern = DIALECT_PATTERN
    else:
        pattern = re.compile(r"\b(" + "|".join(sorted(map(re.escape, terms), key=len, reverse=True)) + r")\b", re.IGNORECASE)
    return pattern.sub(lambda m: _match_case(m.group(0), terms[m.group(0).lower()]), text)


def strip_monetary_text(text: str) -> str:
    for pattern, replacement in MONETARY_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


def is_monetary_key(key) -> bool:
    return isinstance(key, str) and key.lower() in MONETARY_KEYS


def normalise_dialect(document):
    return walk_tree(document, transform_text=to_british_english)


def redact_monetary(document):
    return walk_tree(
        document, transform_text=strip_monetary_text, drop_key=is_monetary_key, transform_key=strip_monetary_text
    )


def apply_budget_band(document: dict, band: str) -> dict:
    budget = document.get("budget")
    if not isinstance(budget, dict):
        budget = {}
    return {**document, "budget": {**budget, "band": band}}


def postprocess_plan(document: dict, band: str) -> dict:
    """Merge the requested budget band, rewrite to British English, then strip monetary content."""
    document = apply_budget_band(document, band)
    document = normalise_dialect(document)
    return redact_monetary(document)

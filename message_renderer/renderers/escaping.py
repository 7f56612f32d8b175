"""
Text escaping helpers for markup renderers.

Substitutions are matched against the original text in a single pass, so an
entity produced for one character is never rewritten by a later rule
(``<`` becomes ``&lt;``, not ``&amp;lt;``).
"""

import re
from typing import Dict, Sequence

XML_ESCAPES: Dict[str, str] = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    "'": "&#39;",
    '"': "&quot;",
}

_XML_PATTERN = re.compile("|".join(re.escape(c) for c in XML_ESCAPES))


def replace_all(text: str, targets: Sequence[str], replacements: Sequence[str]) -> str:
    """
    Replace every occurrence of each target with its replacement.

    Matching is done once over ``text``; replaced output is never searched
    again. When several targets match at the same position the earliest one
    in ``targets`` wins.

    Args:
        text: Input string
        targets: Substrings to look for
        replacements: Replacement for the target at the same index

    Returns:
        The string with all targets replaced

    Raises:
        ValueError: If ``targets`` and ``replacements`` differ in length
    """
    if len(targets) != len(replacements):
        raise ValueError(
            f"Expected {len(targets)} replacements, got {len(replacements)}"
        )
    searched = [t for t in targets if t]
    if not text or not searched:
        return text

    table = dict(zip(reversed(targets), reversed(replacements)))
    pattern = re.compile("|".join(re.escape(t) for t in searched))
    return pattern.sub(lambda match: table[match.group(0)], text)


def escape_xml(text: str) -> str:
    """Escape ``< > & ' "`` for use in XML content and attribute values."""
    if not text:
        return text
    return _XML_PATTERN.sub(lambda match: XML_ESCAPES[match.group(0)], text)

"""
Reply cleanup — strips markdown artifacts from generated plan HTML.

Models sometimes wrap the HTML in a code fence or prefix it with a quoted
language tag even when asked for raw HTML. Pure functions, no I/O.
"""

import re

_HTML_FENCE_OPEN = re.compile(r"\A```html\n?", re.IGNORECASE)
_FENCE_OPEN = re.compile(r"\A```\n?")
_FENCE_CLOSE = re.compile(r"\n?```\Z")
_QUOTED_HTML_TAG = re.compile(r"\A[\"']html[\"']\n?", re.IGNORECASE)


def _strip_once(text: str) -> str:
    cleaned = _FENCE_CLOSE.sub("", _HTML_FENCE_OPEN.sub("", text, count=1), count=1).strip()
    cleaned = _FENCE_CLOSE.sub("", _FENCE_OPEN.sub("", cleaned, count=1), count=1).strip()
    return _QUOTED_HTML_TAG.sub("", cleaned, count=1).strip()


def clean_plan_text(text: str) -> str:
    """Remove wrapping code fences and a stray ``"html"`` prefix.

    One pass runs these steps, each followed by a whitespace trim:

    1. a leading ```` ```html ```` fence and a trailing ```` ``` ````
    2. a plain ```` ``` ```` fence pair
    3. a leading ``"html"`` or ``'html'`` literal

    Passes repeat until the text stops changing, so a fence uncovered by
    step 3 is removed too and ``clean_plan_text`` is idempotent.

    Args:
        text: Raw text from the generation provider.

    Returns:
        The cleaned text.
    """
    cleaned = _strip_once(text)
    while True:
        again = _strip_once(cleaned)
        if again == cleaned:
            return cleaned
        cleaned = again

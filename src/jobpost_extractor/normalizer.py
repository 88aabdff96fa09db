import re

# Structural substitutions run before tag stripping, entity decoding after it.
_STRUCTURE_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"<br\s*/?>", re.IGNORECASE), "\n"),
    (re.compile(r"</p>", re.IGNORECASE), "\n\n"),
    (re.compile(r"</li>", re.IGNORECASE), "\n"),
    (re.compile(r"<li(?:\s[^>]*)?>", re.IGNORECASE), "• "),
    (re.compile(r"</h[1-6]>", re.IGNORECASE), "\n\n"),
]

_TAG_PATTERN = re.compile(r"<[^>]+>")

ENTITIES: list[tuple[str, str]] = [
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
]

_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def normalize_html_text(fragment: str | None) -> str:
    """
    Convert an HTML fragment into readable plain text.

    Paragraphs and headings become blank-line separated blocks, list items
    become "• " bullets, and only a fixed set of common entities is decoded.
    """
    if not fragment:
        return ""

    text = fragment
    for pattern, replacement in _STRUCTURE_RULES:
        text = pattern.sub(replacement, text)

    text = _TAG_PATTERN.sub("", text)

    for entity, char in ENTITIES:
        text = text.replace(entity, char)

    # bs4 has already decoded &nbsp; in markup it re-serializes
    text = text.replace("\xa0", " ")

    text = _EXCESS_NEWLINES.sub("\n\n", text)
    return text.strip()

from bs4 import BeautifulSoup, Tag

HTML_PARSER = "html.parser"


class HtmlDocument:
    """
    Read-only, queryable view over a fetched HTML page.

    Wraps BeautifulSoup so strategies only see selector lookup and
    text/attribute/markup extraction. The builtin "html.parser" tolerates
    malformed markup the way browsers do and never raises on bad input.
    """

    def __init__(self, html: str) -> None:
        self._soup = BeautifulSoup(html or "", HTML_PARSER)

    def select_first(self, selector: str) -> Tag | None:
        return self._soup.select_one(selector)

    @staticmethod
    def text(node: Tag | None) -> str:
        """Return the node's plain text, trimmed. Missing nodes yield ""."""
        if node is None:
            return ""
        return node.get_text().strip()

    @staticmethod
    def attr(node: Tag | None, name: str) -> str | None:
        """Return an attribute value; multi-valued attributes like class are space-joined."""
        if node is None:
            return None
        value = node.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    @staticmethod
    def html(node: Tag | None) -> str | None:
        """Return the node's inner markup, suitable for normalize_html_text()."""
        if node is None:
            return None
        return node.decode_contents()

    def all_scripts(self, script_type: str) -> list[Tag]:
        """All <script> elements whose type attribute equals script_type (case-insensitive)."""
        wanted = script_type.lower()
        return [
            script
            for script in self._soup.find_all("script")
            if (self.attr(script, "type") or "").strip().lower() == wanted
        ]

    @staticmethod
    def script_text(node: Tag) -> str:
        """Raw body of a <script> element."""
        return node.string or ""

    def first_text(self, selector: str) -> str:
        return self.text(self.select_first(selector))

    def first_attr(self, selector: str, name: str) -> str:
        value = self.attr(self.select_first(selector), name)
        return value.strip() if value else ""

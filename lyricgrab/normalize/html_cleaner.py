from __future__ import annotations

from typing import Optional, Set
from lxml import html, etree


DISCARD: Set[str] = {
    "script",
    "style",
    "noscript",
    "header",
    "footer",
    "form",
    "nav",
}


def tag_name(el) -> str:
    # Comments and processing instructions carry a callable tag in lxml
    return el.tag.lower() if isinstance(el.tag, str) else ""


# Text is handed over already decoded; feeding lxml UTF-8 bytes with a fixed
# encoding also accepts pages that open with an <?xml ... encoding=...?> prolog
_PARSER = html.HTMLParser(encoding="utf-8")


def parse_html(html_text: Optional[str]) -> html.HtmlElement:
    if not html_text or not html_text.strip():
        return html.Element("html")
    try:
        return html.document_fromstring(html_text.encode("utf-8"), parser=_PARSER)
    except etree.ParserError:
        # lxml refuses documents with no elements at all (e.g. only a comment)
        return html.Element("html")


def sanitize(root: html.HtmlElement) -> None:
    """Remove non-content elements (scripts, styles, page chrome, forms) in place.

    ``drop_tree`` keeps the tail text of the removed element, so
    ``a<script>x</script>b`` leaves ``ab`` behind.
    """
    for el in list(root.iter()):
        if tag_name(el) in DISCARD:
            if el.getparent() is not None:
                el.drop_tree()


def find_body(root: html.HtmlElement) -> html.HtmlElement:
    if tag_name(root) == "body":
        return root
    body = root.find(".//body")
    return body if body is not None else root

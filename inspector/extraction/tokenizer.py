"""Streaming element scanner.

Walks HTML with a tokenizer and a stack of open elements so that an
element's text runs to its *matching* closing tag, not the first closing
tag with the same name. No tree is built; only the text of selected
elements is buffered.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from html.parser import HTMLParser

from inspector.extraction.cleaner import strip_marked_sections

# Elements that never have content or a closing tag
VOID_ELEMENTS = frozenset(
    [
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    ]
)

# A new <p>/<li> closes an open one unless one of these sits in between
IMPLICIT_CLOSE_BOUNDARIES = {
    "p": frozenset(
        ["div", "section", "article", "main", "aside", "blockquote", "td", "th", "li", "button"]
    ),
    "li": frozenset(["ul", "ol", "menu"]),
}

# classify(tag, start_tag_text, attrs) -> keys the element is selected under
Classifier = Callable[[str, str, dict[str, str | None]], Iterable[str]]


@dataclass
class ElementSpan:
    """Text content of one selected element."""

    key: str
    tag: str
    start_tag: str
    text: str
    order: int


@dataclass
class _OpenElement:
    tag: str
    start_tag: str
    order: int
    keys: list[str] = field(default_factory=list)
    parts: list[str] = field(default_factory=list)


class _ElementScanner(HTMLParser):
    def __init__(self, classify: Classifier):
        # Entities are kept verbatim so callers decide what to decode
        super().__init__(convert_charrefs=False)
        self._classify = classify
        self._stack: list[_OpenElement] = []
        self._order = 0
        self.spans: list[ElementSpan] = []

    def _emit(self, text: str) -> None:
        for element in self._stack:
            if element.keys:
                element.parts.append(text)

    def _open_keys(self) -> set[str]:
        return {key for element in self._stack for key in element.keys}

    def _close_to(self, index: int) -> None:
        while len(self._stack) > index:
            element = self._stack.pop()
            text = "".join(element.parts)
            for key in element.keys:
                self.spans.append(
                    ElementSpan(
                        key=key,
                        tag=element.tag,
                        start_tag=element.start_tag,
                        text=text,
                        order=element.order,
                    )
                )

    def _find_open(self, tag: str, boundaries: frozenset[str] = frozenset()) -> int | None:
        for index in range(len(self._stack) - 1, -1, -1):
            name = self._stack[index].tag
            if name == tag:
                return index
            if name in boundaries:
                return None
        return None

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        boundaries = IMPLICIT_CLOSE_BOUNDARIES.get(tag)
        if boundaries is not None:
            index = self._find_open(tag, boundaries)
            if index is not None:
                self._close_to(index)

        self._emit(" ")
        if tag in VOID_ELEMENTS:
            return

        start_tag = self.get_starttag_text() or ""
        open_keys = self._open_keys()
        # An element nested in one already selected under the same key is
        # part of that outer span, not a span of its own
        keys = [
            key for key in self._classify(tag, start_tag, dict(attrs)) if key not in open_keys
        ]
        self._stack.append(_OpenElement(tag=tag, start_tag=start_tag, order=self._order, keys=keys))
        self._order += 1

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        self._emit(" ")

    def handle_endtag(self, tag: str) -> None:
        index = self._find_open(tag)
        if index is not None:
            self._close_to(index)
        self._emit(" ")

    def handle_data(self, data: str) -> None:
        self._emit(data)

    def handle_entityref(self, name: str) -> None:
        self._emit(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self._emit(f"&#{name};")


def scan_elements(html: str, classify: Classifier) -> list[ElementSpan]:
    """
    Collect the text of every element selected by ``classify``.

    Inner tags and marked sections (``<![CDATA[...]]>``) become single
    spaces; entities are left undecoded.
    Elements still open at the end of input are dropped, as they have no
    closing tag.

    Args:
        html: Markup to scan
        classify: Returns the keys an element is selected under (may be empty)

    Returns:
        Spans in document order of their opening tags
    """
    scanner = _ElementScanner(classify)
    scanner.feed(strip_marked_sections(html))
    scanner.close()
    return sorted(scanner.spans, key=lambda span: span.order)

from pathlib import Path
from typing import Union

from bs4 import BeautifulSoup, Tag

from blogger.errors import ElementNotFoundError


class PageDocument:
    """An HTML page whose elements can have their contents replaced by id."""

    def __init__(self, markup: str = "", parser: str = "html.parser"):
        self.parser = parser
        self.soup = BeautifulSoup(markup, parser)

    @classmethod
    def from_file(
        cls, path: Union[str, Path], parser: str = "html.parser"
    ) -> "PageDocument":
        return cls(Path(path).read_text(encoding="utf-8"), parser)

    def get_element(self, dom_id: str) -> Tag:
        element = self.soup.find(id=dom_id)
        if element is None:
            raise ElementNotFoundError(dom_id)
        return element

    def set_inner_html(self, dom_id: str, markup: str) -> None:
        """Replace everything inside the element with `markup`."""
        element = self.get_element(dom_id)
        element.clear()
        fragment = BeautifulSoup(markup, self.parser)
        for child in list(fragment.contents):
            element.append(child.extract())

    def get_inner_html(self, dom_id: str) -> str:
        return self.get_element(dom_id).decode_contents()

    def render(self) -> str:
        return str(self.soup)

"""
Document Loader

Parses raw HTML into a BeautifulSoup tree and pulls raw strings out of it
with CSS selectors. The html.parser backend is tolerant: malformed markup
still yields a (possibly sparse) tree instead of an error.
"""

from typing import Dict, Iterator, List, Optional, Tuple, Union
from bs4 import BeautifulSoup, Tag

from readcomics.core.exceptions import MissingFieldError

# A field is read either as the node text (None) or as one of its attributes
FieldSpec = Tuple[str, Optional[str]]
Node = Union[BeautifulSoup, Tag]


def parse_document(html: str) -> BeautifulSoup:
    """Parse an HTML string into a queryable document."""
    return BeautifulSoup(html, 'html.parser')


def node_text(node: Tag) -> str:
    """Text content of a node with whitespace runs collapsed; inline fragments join without a space."""
    return " ".join(node.get_text().split())


def node_attr(node: Tag, attr: str) -> str:
    """Attribute value of a node, or "" when absent. Whitespace is preserved."""
    value = node.get(attr)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return value


def select_texts(doc: Node, selector: str) -> List[str]:
    return [node_text(node) for node in doc.select(selector)]


def select_attrs(doc: Node, selector: str, attr: str) -> List[str]:
    return [node_attr(node, attr) for node in doc.select(selector)]


def select_first_text(doc: Node, selector: str, field: str) -> str:
    """
    Text of the first node matching selector.

    Raises:
        MissingFieldError: when nothing matches
    """
    node = doc.select_one(selector)
    if node is None:
        raise MissingFieldError(field, selector)
    return node_text(node)


def select_first_attr(doc: Node, selector: str, attr: str) -> Optional[str]:
    """Attribute of the first node matching selector, None when nothing matches."""
    node = doc.select_one(selector)
    if node is None:
        return None
    return node_attr(node, attr)


def select_rows(
    doc: Node,
    row_selector: str,
    fields: Dict[str, FieldSpec]
) -> Iterator[Dict[str, Optional[str]]]:
    """
    Select row containers, then read every field inside each row.

    Fields are sub-selected within their own row, so a row missing one field
    cannot shift the others out of step. A missing field is yielded as None.

    Args:
        doc: Parsed document
        row_selector: Selector matching one container per logical item
        fields: field name -> (selector relative to the row, attribute or None for text)
    """
    for row in doc.select(row_selector):
        values: Dict[str, Optional[str]] = {}
        for name, (selector, attr) in fields.items():
            node = row.select_one(selector) if selector else row
            if node is None:
                values[name] = None
            elif attr is None:
                values[name] = node_text(node)
            else:
                values[name] = node_attr(node, attr)
        yield values

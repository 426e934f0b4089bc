"""
XML to tree conversion for provider responses.

Converts a parsed XML document into nested dicts, lists and strings:

- an element holding only text becomes the trimmed string;
- an element with child elements becomes a dict keyed by child tag name,
  where a tag seen once maps to its converted child and a tag seen several
  times maps to a list of converted children in document order;
- attributes are added to the dict under ``_<name>`` (one more prefix
  when that would clash with ``TEXT_KEY``); when the element has no child
  elements its text moves under ``TEXT_KEY`` so both fit in one dict.

Callers must tolerate the single-vs-list asymmetry; ``as_list`` smooths it.
"""

import re
from typing import Any, Union

from lxml import etree

from .exceptions import XmlParseError


TEXT_KEY = "__text"
ATTRIBUTE_PREFIX = "_"

XmlValue = Union[str, dict[str, Any], list[Any]]

_XML_DECLARATION = re.compile(r"^\ufeff?\s*<\?xml\s[^>]*\?>")

# Secure parser
_parser = etree.XMLParser(
    resolve_entities=False,
    no_network=True,
)


def parse_xml(text: Union[str, bytes]) -> etree._Element:
    """
    Parse an XML document.

    Args:
        text: Raw XML document; bytes are decoded per the XML declaration

    Returns:
        The document root element

    Raises:
        XmlParseError: If the document is empty or not well-formed
    """
    if isinstance(text, str):
        # Already decoded; a declared encoding no longer applies
        data = _XML_DECLARATION.sub("", text, count=1).encode("utf-8")
    else:
        data = text
    if not data or not data.strip():
        raise XmlParseError(code="parse_error", message="Empty XML document")

    try:
        root = etree.fromstring(data, _parser)
    except etree.XMLSyntaxError as e:
        raise XmlParseError(
            code="parse_error",
            message=f"Malformed XML: {e}",
            details={"line": e.lineno},
        ) from e

    if root is None:
        raise XmlParseError(code="parse_error", message="XML document has no root element")
    return root


def local_name(element: etree._Element) -> str:
    """Tag name of an element without its namespace URI."""
    return etree.QName(element).localname


def _has_content(text: Any) -> bool:
    return text is not None and text.strip() != ""


def _attributes(element: etree._Element) -> dict[str, str]:
    attributes = {}

    # Namespace declarations made on this element
    parent = element.getparent()
    parent_nsmap = parent.nsmap if parent is not None else {}
    for prefix, uri in element.nsmap.items():
        if parent_nsmap.get(prefix) != uri:
            name = "xmlns" if prefix is None else f"xmlns:{prefix}"
            attributes[ATTRIBUTE_PREFIX + name] = uri

    for name, value in element.attrib.items():
        key = ATTRIBUTE_PREFIX + etree.QName(name).localname
        # TEXT_KEY is reserved for element text
        if key == TEXT_KEY:
            key = ATTRIBUTE_PREFIX + key
        attributes[key] = str(value)

    return attributes


def convert(element: etree._Element) -> XmlValue:
    """
    Convert an element and its subtree.

    When real text and child elements are mixed, the child elements win
    and the text is dropped. Among several text runs the last non-empty
    one is kept.

    Args:
        element: Element to convert

    Returns:
        String, dict or (for repeated tags inside a dict) list values
    """
    children: dict[str, list[XmlValue]] = {}
    text = element.text.strip() if _has_content(element.text) else None

    for child in element:
        # Comments, processing instructions and entity references carry no data
        if isinstance(child.tag, str):
            children.setdefault(local_name(child), []).append(convert(child))
        if _has_content(child.tail):
            text = child.tail.strip()

    output: XmlValue
    if children:
        output = {
            tag: values[0] if len(values) == 1 else values
            for tag, values in children.items()
        }
    elif text is not None:
        output = text
    else:
        output = {}

    attributes = _attributes(element)
    if attributes:
        if not isinstance(output, dict):
            output = {TEXT_KEY: output}
        output.update(attributes)

    return output


def xml_to_tree(text: Union[str, bytes]) -> dict[str, XmlValue]:
    """
    Parse an XML document and convert it, keyed by the root tag name.

    Raises:
        XmlParseError: If the document is not well-formed
    """
    root = parse_xml(text)
    return {local_name(root): convert(root)}


def as_list(value: Any) -> list[Any]:
    """Wrap a possibly collapsed value as a list (``None`` -> ``[]``)."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]

"""Indentation of sitemap XML."""

from __future__ import annotations

from xml.dom import Node, minidom


def _strip_blank_text(node: Node) -> None:
    for child in list(node.childNodes):
        if child.nodeType == Node.TEXT_NODE and not child.data.strip():
            node.removeChild(child)
        elif child.hasChildNodes():
            _strip_blank_text(child)


def pretty_print(xml: str, indent: int) -> str:
    document = minidom.parseString(xml.encode("utf-8"))  # noqa: S318
    try:
        _strip_blank_text(document)
        pretty = document.toprettyxml(indent=" " * indent, encoding="UTF-8").decode("utf-8")
    finally:
        document.unlink()
    return pretty

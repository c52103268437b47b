"""SVG optimization backed by lxml."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Protocol

from lxml import etree

logger = logging.getLogger(__name__)

EDITOR_NAMESPACES = (
    "http://www.inkscape.org/namespaces/inkscape",
    "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
    "http://www.bohemiancoding.com/sketch/ns",
    "http://ns.adobe.com/AdobeIllustrator/10.0/",
    "http://ns.adobe.com/AdobeSVGViewerExtensions/3.0/",
)
STRIP_ATTR_QNAMES = ("{http://www.w3.org/XML/1998/namespace}space",)
REMOVABLE_ELEMENTS = ("metadata", "title", "desc")
EMPTY_CONTAINERS = ("g", "defs")

_XML_DECLARATION_RE = re.compile(r"^\s*<\?xml[^>]*\?>")
_DIMENSION_RE = re.compile(r"^\s*([0-9]*\.?[0-9]+)\s*(px)?\s*$")


class SvgOptimizationError(ValueError):
    """Raised when an SVG document cannot be optimized."""


class Optimizer(Protocol):
    """Turns raw SVG text into optimized SVG text."""

    def optimize(self, svg_text: str) -> str:
        ...


@dataclass(frozen=True)
class OptimizerOptions:
    """Switches for the optimization passes."""

    multipass: bool = True
    remove_dimensions: bool = True
    max_passes: int = 10


def _localname(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def _namespace(tag: str) -> str:
    if tag.startswith("{"):
        return tag[1:].split("}", 1)[0]
    return ""


def _is_editor_node(name: str) -> bool:
    return _namespace(name) in EDITOR_NAMESPACES


def _parse(svg_text: str):
    parser = etree.XMLParser(
        remove_comments=True,
        remove_pis=True,
        remove_blank_text=True,
        resolve_entities=False,
        no_network=True,
    )
    source = _XML_DECLARATION_RE.sub("", svg_text.lstrip("\ufeff"), count=1)
    if not source.strip():
        raise SvgOptimizationError("SVG document is empty")
    try:
        return etree.fromstring(source, parser)
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise SvgOptimizationError(str(exc)) from exc


def _remove(elem) -> None:
    parent = elem.getparent()
    if parent is None:
        return
    tail = elem.tail
    previous = elem.getprevious()
    parent.remove(elem)
    if tail and tail.strip():
        if previous is not None:
            previous.tail = (previous.tail or "") + tail
        else:
            parent.text = (parent.text or "") + tail


def _strip_elements(root) -> None:
    doomed = []
    for elem in root.iter():
        if not isinstance(elem.tag, str) or elem is root:
            continue
        if _is_editor_node(elem.tag) or _localname(elem.tag) in REMOVABLE_ELEMENTS:
            doomed.append(elem)
    for elem in doomed:
        _remove(elem)


def _strip_attributes(root) -> None:
    for elem in root.iter():
        if not isinstance(elem.tag, str):
            continue
        for attr in list(elem.attrib):
            if attr in STRIP_ATTR_QNAMES or _is_editor_node(attr):
                del elem.attrib[attr]
                continue
            value = elem.attrib[attr]
            collapsed = " ".join(value.split())
            if collapsed != value:
                elem.attrib[attr] = collapsed


def _prune_empty_containers(root) -> None:
    for elem in list(root.iter()):
        if elem is root or not isinstance(elem.tag, str):
            continue
        if _localname(elem.tag) not in EMPTY_CONTAINERS:
            continue
        if len(elem) == 0 and not (elem.text or "").strip():
            _remove(elem)


def _apply_dimensions(root, options: OptimizerOptions) -> None:
    if not options.remove_dimensions or _localname(root.tag) != "svg":
        return
    width = root.get("width")
    height = root.get("height")
    if root.get("viewBox") is None:
        width_match = _DIMENSION_RE.match(width or "")
        height_match = _DIMENSION_RE.match(height or "")
        if not (width_match and height_match):
            return
        root.set("viewBox", f"0 0 {width_match.group(1)} {height_match.group(1)}")
    root.attrib.pop("width", None)
    root.attrib.pop("height", None)


class SvgOptimizer:
    """Shrink SVG markup without changing how the icon renders.

    Comments, processing instructions, ``<metadata>``/``<title>``/``<desc>``,
    editor namespaces and empty containers are dropped. With
    ``remove_dimensions`` the root ``width``/``height`` are replaced by a
    ``viewBox`` so the icon scales with its CSS box.
    """

    def __init__(self, options: Optional[OptimizerOptions] = None) -> None:
        self.options = options or OptimizerOptions()

    def _single_pass(self, svg_text: str) -> str:
        root = _parse(svg_text)
        if not isinstance(root.tag, str):
            raise SvgOptimizationError("SVG document has no root element")
        _strip_elements(root)
        _strip_attributes(root)
        _prune_empty_containers(root)
        _apply_dimensions(root, self.options)
        etree.cleanup_namespaces(root)
        return etree.tostring(root, encoding="unicode")

    def optimize(self, svg_text: str) -> str:
        if not isinstance(svg_text, str):
            raise SvgOptimizationError(f"Expected SVG text, got {type(svg_text).__name__}")
        result = self._single_pass(svg_text)
        if not self.options.multipass:
            return result
        for _ in range(max(0, self.options.max_passes - 1)):
            again = self._single_pass(result)
            if again == result:
                break
            result = again
        logger.debug(f"Optimized SVG from {len(svg_text)} to {len(result)} characters")
        return result

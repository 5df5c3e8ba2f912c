from __future__ import annotations

"""Simple reusable helper functions.

Argument guards, tolerant scalar parsing, comma-list handling, namespace-aware
element selection and XML (de)serialisation wrappers shared by every entity
loader and writer.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from lxml import etree as ET

from .exceptions import ArgumentEmptyError, ArgumentNullError, DocumentLoadError

__all__ = [
    "require",
    "require_text",
    "normalize_text",
    "split_comma_list",
    "join_comma_list",
    "parse_int",
    "parse_float",
    "parse_bool",
    "format_bool",
    "qname",
    "local_name",
    "namespace_of",
    "select_child",
    "select_children",
    "element_text",
    "in_scope_namespaces",
    "declared_nsmap",
    "make_parser",
    "parse_xml_source",
    "serialize_element",
    "save_xml_file",
]

logger = logging.getLogger(__name__)

XmlSource = Union[ET._Element, ET._ElementTree, bytes, bytearray, str, os.PathLike, Any]


# ---------------------------------------------------------------------------
# Argument guards
# ---------------------------------------------------------------------------

def require(value: Any, argument: str, entity: Optional[str] = None) -> Any:
    """Return *value* unchanged, raising :class:`ArgumentNullError` on ``None``."""
    if value is None:
        raise ArgumentNullError(argument, entity)
    return value


def require_text(value: Optional[str], argument: str, entity: Optional[str] = None) -> str:
    """Return *value* trimmed; ``None`` and blank strings are contract violations."""
    if value is None:
        raise ArgumentNullError(argument, entity)
    text = str(value).strip()
    if not text:
        raise ArgumentEmptyError(argument, entity)
    return text


def normalize_text(value: Optional[str]) -> str:
    """Trim *value*; ``None`` becomes the empty string."""
    if value is None:
        return ""
    return str(value).strip()


# ---------------------------------------------------------------------------
# Delimited lists and tolerant scalar parsing
# ---------------------------------------------------------------------------

def split_comma_list(value: Optional[str]) -> List[str]:
    """Split a comma-delimited attribute into trimmed, non-empty fragments."""
    if not value:
        return []
    return [fragment.strip() for fragment in value.split(",") if fragment.strip()]


def join_comma_list(values: Iterable[Any]) -> str:
    return ",".join(str(value) for value in values)


def parse_int(text: Optional[str]) -> Optional[int]:
    """Parse an integer, returning ``None`` when *text* is not one."""
    if text is None:
        return None
    try:
        return int(text.strip())
    except (TypeError, ValueError):
        logger.debug("Skipping unparsable integer value %r", text)
        return None


def parse_float(text: Optional[str]) -> Optional[float]:
    if text is None:
        return None
    try:
        return float(text.strip())
    except (TypeError, ValueError):
        logger.debug("Skipping unparsable decimal value %r", text)
        return None


def parse_bool(text: Optional[str]) -> Optional[bool]:
    """Parse ``true``/``false``/``1``/``0`` (any case); ``None`` otherwise."""
    if text is None:
        return None
    token = text.strip().lower()
    if token in ("true", "1"):
        return True
    if token in ("false", "0"):
        return False
    logger.debug("Skipping unparsable boolean value %r", text)
    return None


def format_bool(value: bool) -> str:
    return "true" if value else "false"


# ---------------------------------------------------------------------------
# Names and navigation
# ---------------------------------------------------------------------------

def qname(namespace: Optional[str], local: str) -> str:
    """Return the Clark notation name ``{namespace}local`` (or *local*)."""
    if namespace:
        return f"{{{namespace}}}{local}"
    return local


def local_name(tag: Any) -> str:
    """Return the local part of an lxml tag or attribute name."""
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def namespace_of(tag: Any) -> Optional[str]:
    """Return the namespace URI of an lxml tag or attribute name, if any."""
    if isinstance(tag, str) and tag.startswith("{"):
        return tag[1:].split("}", 1)[0]
    return None


def select_children(element: ET._Element, local: str,
                    namespace: Optional[str] = None) -> List[ET._Element]:
    """Return the child elements named *local*.

    When *namespace* is given the qualified name is tried first; if that
    selects nothing the unqualified name is used instead, so documents that
    omit the format namespace still load.
    """
    if namespace:
        matches = list(element.iterchildren(qname(namespace, local)))
        if matches:
            return matches
    return list(element.iterchildren(local))


def select_child(element: ET._Element, local: str,
                 namespace: Optional[str] = None) -> Optional[ET._Element]:
    matches = select_children(element, local, namespace)
    return matches[0] if matches else None


def element_text(element: Optional[ET._Element]) -> str:
    """Return the trimmed text content of *element* (``""`` for ``None``)."""
    if element is None:
        return ""
    return "".join(element.itertext()).strip()


def in_scope_namespaces(element: ET._Element) -> Dict[Optional[str], str]:
    """Return the prefix to URI map of every namespace in scope on *element*."""
    return dict(element.nsmap)


def declared_nsmap(parent: ET._Element, prefix: Optional[str],
                   namespace: str) -> Optional[Dict[Optional[str], str]]:
    """Return an ``nsmap`` declaring *namespace* unless *parent* already has it.

    Passing the result to :func:`lxml.etree.SubElement` keeps the preferred
    prefix when no ancestor declared the namespace and avoids a redundant
    declaration when one did.
    """
    if namespace in parent.nsmap.values():
        return None
    if prefix and parent.nsmap.get(prefix) not in (None, namespace):
        return None
    return {prefix: namespace}


# ---------------------------------------------------------------------------
# XML convenience wrappers
# ---------------------------------------------------------------------------

def make_parser(encoding: Optional[str] = None) -> ET.XMLParser:
    """Return the parser used for every document source.

    Blank text is dropped so re-serialised trees indent cleanly; entity
    resolution and network access are disabled.
    """
    return ET.XMLParser(
        encoding=encoding,
        remove_blank_text=True,
        resolve_entities=False,
        no_network=True,
    )


def parse_xml_source(source: XmlSource, encoding: str = "utf-8") -> ET._Element:
    """Turn *source* into a root element.

    Accepted sources are an lxml element or tree, ``bytes``, a binary or text
    stream, or a filesystem path.  :class:`lxml.etree.XMLSyntaxError`
    propagates unchanged for malformed input.

    Raises:
        ArgumentNullError: If *source* is ``None``
        DocumentLoadError: If the source type is unsupported or unreadable
    """
    require(source, "source")

    if isinstance(source, ET._Element):
        return source
    if isinstance(source, ET._ElementTree):
        return source.getroot()
    if isinstance(source, (bytes, bytearray)):
        return ET.fromstring(bytes(source), make_parser())
    if hasattr(source, "read"):
        data = source.read()
        if isinstance(data, str):
            return ET.fromstring(data.encode(encoding), make_parser(encoding))
        return ET.fromstring(data, make_parser())
    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        try:
            with open(path, "rb") as fh:
                data = fh.read()
        except OSError as exc:
            logger.error("I/O FAIL: read XML path=%s", path, exc_info=True)
            raise DocumentLoadError(f"Cannot read '{path}': {exc}", source=source, cause=exc)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("I/O: read XML path=%s bytes=%d", path, len(data))
        return ET.fromstring(data, make_parser())

    raise DocumentLoadError(
        f"Unsupported XML source type: {type(source).__name__}", source=source
    )


def serialize_element(element: ET._Element, *, pretty: bool = True,
                      xml_declaration: bool = True, encoding: str = "utf-8") -> bytes:
    """Serialise *element* with the given indentation and declaration policy."""
    return ET.tostring(
        element,
        pretty_print=pretty,
        xml_declaration=xml_declaration,
        encoding=encoding,
    )


def save_xml_file(element: ET._Element, path: Union[str, os.PathLike], *,
                  pretty: bool = True, xml_declaration: bool = True,
                  encoding: str = "utf-8") -> None:
    """Write *element* to *path*.

    Parameters
    ----------
    element
        Root ``lxml`` element to serialise.
    path
        Destination file path (opened in binary mode).
    pretty
        When *True* (default) lxml pretty-prints the output.
    """
    xml_bytes = serialize_element(
        element, pretty=pretty, xml_declaration=xml_declaration, encoding=encoding
    )
    try:
        with open(path, "wb") as fh:
            fh.write(xml_bytes)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("I/O: wrote XML path=%s bytes=%d", path, len(xml_bytes))
    except Exception:
        logger.error("I/O FAIL: write XML path=%s", path, exc_info=True)
        raise

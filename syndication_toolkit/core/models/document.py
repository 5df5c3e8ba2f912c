from __future__ import annotations

"""Shared document facade.

:class:`SyndicationDocument` wires XML sources into a format's loader and
its writer back into bytes or files.  Concrete documents implement
:meth:`SyndicationDocument._load_root` and :meth:`SyndicationDocument._create_root`;
everything else (source handling, namespace pre-pass, serialisation,
loaded notifications, background loads) lives here.
"""

import logging
import os
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Union

from lxml import etree as ET

from ..exceptions import LoadInProgressError
from ..extensions.adapter import SyndicationExtensionAdapter
from ..fetch import WebRequestOptions, fetch_resource
from ..settings import LoadSettings, SaveSettings
from ..utils import local_name, parse_xml_source, require, save_xml_file, serialize_element
from .entity import ExtensibleEntity

logger = logging.getLogger(__name__)

__all__ = ["SyndicationDocument", "DocumentLoadedEvent", "LoadOperation"]


@dataclass
class DocumentLoadedEvent:
    """Payload handed to loaded listeners."""

    document: "SyndicationDocument"
    source: Any = None
    user_token: Any = None


LoadedListener = Callable[[DocumentLoadedEvent], None]


class LoadOperation:
    """Handle for one background load started by ``load_async``.

    The handle belongs to the caller: it is the only way to cancel the load
    or wait for it.  A load cancelled before it completes leaves the
    document untouched and does not notify listeners.
    """

    def __init__(self, document: "SyndicationDocument", url: str, settings: LoadSettings,
                 options: Optional[WebRequestOptions], user_token: Any = None) -> None:
        self.document = document
        self.url = url
        self.settings = settings
        self.options = options
        self.user_token = user_token
        self.error: Optional[BaseException] = None
        self._lock = threading.Lock()
        self._cancelled = False
        self._completed = False
        self._finished = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name=f"syndication-load-{id(self):x}", daemon=True
        )

    @property
    def done(self) -> bool:
        return self._finished.is_set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def completed(self) -> bool:
        """True if the document was populated by this operation."""
        return self._completed

    def start(self) -> "LoadOperation":
        self._thread.start()
        return self

    def cancel(self) -> bool:
        """Request cancellation. Returns False if the load already completed."""
        with self._lock:
            if self._completed:
                return False
            self._cancelled = True
        logger.info("Cancelled load of %s", self.url)
        return True

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the operation finishes. Returns False on timeout."""
        return self._finished.wait(timeout)

    def _run(self) -> None:
        try:
            data = fetch_resource(self.url, self.options, self.settings.timeout)
            if self._cancelled:
                return
            root = parse_xml_source(data, self.settings.character_encoding)
            with self._lock:
                if self._cancelled:
                    return
                self.document._apply_load(root, self.settings)
                self._completed = True
            self.document._notify_loaded(self.url, self.user_token)
        except Exception as exc:
            self.error = exc
            logger.error("Background load of %s failed: %s", self.url, exc)
        finally:
            self._finished.set()
            self.document._release_operation(self)


class SyndicationDocument(ExtensibleEntity):
    """Base class of every format's root document.

    Class attributes
    ----------------
    FORMAT
        Short format identifier (``opml``, ``rsd``, ``blogml``).
    VERSION
        Format version written on save.
    ROOT_ELEMENT
        Local name of the root element.
    NAMESPACE
        Namespace of the format's elements, if any.
    """

    FORMAT: str = ""
    VERSION: str = ""
    ROOT_ELEMENT: str = ""
    NAMESPACE: Optional[str] = None

    def __init__(self) -> None:
        super().__init__()
        self._loaded_listeners: List[LoadedListener] = []
        self._operation: Optional[LoadOperation] = None
        self._operation_lock = threading.Lock()

    @property
    def format(self) -> str:
        return self.FORMAT

    @property
    def version(self) -> str:
        return self.VERSION

    # ------------------------------------------------------------------
    # Loaded notification
    # ------------------------------------------------------------------
    def add_loaded_listener(self, listener: LoadedListener) -> None:
        require(listener, "listener", type(self).__name__)
        self._loaded_listeners.append(listener)

    def remove_loaded_listener(self, listener: LoadedListener) -> bool:
        try:
            self._loaded_listeners.remove(listener)
            return True
        except ValueError:
            return False

    def _notify_loaded(self, source: Any = None, user_token: Any = None) -> None:
        event = DocumentLoadedEvent(self, source, user_token)
        for listener in list(self._loaded_listeners):
            listener(event)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    @classmethod
    def create(cls, source: Any, settings: Optional[LoadSettings] = None):
        """Return a new document loaded from *source*."""
        document = cls()
        document.load(source, settings)
        return document

    def load(self, source: Any, settings: Optional[LoadSettings] = None) -> None:
        """Populate the document from *source*.

        *source* may be an lxml element or tree, ``bytes``, a binary or text
        stream, or a file path.  Loaded content is added to the current
        graph; use :meth:`create` for a fresh document.

        Raises:
            ArgumentNullError: If *source* is None
            DocumentLoadError: If the source cannot be read
            lxml.etree.XMLSyntaxError: If the source is not well-formed XML
        """
        settings = settings or LoadSettings.from_config()
        root = parse_xml_source(source, settings.character_encoding)
        self._apply_load(root, settings)
        self._notify_loaded(source)

    def load_element(self, root: ET._Element, settings: Optional[LoadSettings] = None) -> bool:
        """Load from an already parsed root element without notifying listeners."""
        require(root, "root", type(self).__name__)
        return self._load_root(root, settings)

    def load_from_url(self, url: str, settings: Optional[LoadSettings] = None,
                      options: Optional[WebRequestOptions] = None) -> None:
        """Fetch *url* and load the result synchronously."""
        settings = settings or LoadSettings.from_config()
        data = fetch_resource(url, options, settings.timeout)
        root = parse_xml_source(data, settings.character_encoding)
        self._apply_load(root, settings)
        self._notify_loaded(url)

    def load_async(self, url: str, settings: Optional[LoadSettings] = None,
                   options: Optional[WebRequestOptions] = None,
                   user_token: Any = None) -> LoadOperation:
        """Start loading *url* in the background.

        Raises:
            LoadInProgressError: If this document already has a load in flight
        """
        settings = settings or LoadSettings.from_config()
        with self._operation_lock:
            if self._operation is not None and not self._operation.done:
                raise LoadInProgressError(
                    f"A load of {self._operation.url} is already in progress",
                    entity=type(self).__name__,
                )
            operation = LoadOperation(self, url, settings, options, user_token)
            self._operation = operation
        return operation.start()

    def _release_operation(self, operation: LoadOperation) -> None:
        with self._operation_lock:
            if self._operation is operation:
                self._operation = None

    def _apply_load(self, root: ET._Element, settings: LoadSettings) -> None:
        found = self._load_root(root, settings)
        if found:
            logger.info("Loaded %s document from <%s>", self.FORMAT, local_name(root.tag))
        else:
            logger.info("No %s content recognised in <%s>", self.FORMAT, local_name(root.tag))

    def _is_root(self, root: ET._Element) -> bool:
        return local_name(root.tag) == self.ROOT_ELEMENT

    def _load_root(self, root: ET._Element, settings: Optional[LoadSettings]) -> bool:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Saving
    # ------------------------------------------------------------------
    def _create_root(self, nsmap: Dict[Optional[str], str]) -> ET._Element:
        raise NotImplementedError

    def build_tree(self, settings: Optional[SaveSettings] = None) -> ET._Element:
        """Return the document as a new lxml root element.

        With auto-detection the whole entity tree is walked first so the
        root declares the namespace of every attached extension.
        """
        settings = settings or SaveSettings.from_config()
        discovered = []
        if settings.auto_detect_extensions:
            discovered = SyndicationExtensionAdapter.fill_extension_types([self])
        nsmap: Dict[Optional[str], str] = dict(
            SyndicationExtensionAdapter.namespace_map(discovered, settings.supported_extensions)
        )
        return self._create_root(nsmap)

    def create_navigator(self) -> ET._Element:
        """Return a read-only style view: a freshly built root element."""
        return self.build_tree(SaveSettings())

    def to_xml(self, settings: Optional[SaveSettings] = None) -> bytes:
        settings = settings or SaveSettings.from_config()
        return serialize_element(
            self.build_tree(settings),
            pretty=not settings.minimize_output_size,
            xml_declaration=settings.xml_declaration,
            encoding=settings.character_encoding,
        )

    def save(self, destination: Union[str, os.PathLike, Any],
             settings: Optional[SaveSettings] = None) -> None:
        """Write the document to a path or a binary stream."""
        require(destination, "destination", type(self).__name__)
        settings = settings or SaveSettings.from_config()
        if hasattr(destination, "write"):
            destination.write(self.to_xml(settings))
            logger.info("Saved %s document to stream", self.FORMAT)
            return
        save_xml_file(
            self.build_tree(settings),
            destination,
            pretty=not settings.minimize_output_size,
            xml_declaration=settings.xml_declaration,
            encoding=settings.character_encoding,
        )
        logger.info("Saved %s document to %s", self.FORMAT, destination)

    def write_to(self, parent: ET._Element) -> None:
        require(parent, "parent", type(self).__name__)
        parent.append(self.build_tree(SaveSettings()))

    def to_string(self) -> str:
        return ET.tostring(self.build_tree(SaveSettings()), encoding="unicode", pretty_print=True)

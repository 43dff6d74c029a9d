"""Append-only storage for template and table stencils."""

from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .datatypes import TableStencil, TemplateStencil
from .errors import DuplicateIDError, EmptyIDError, StencilNotFoundError

logger = logging.getLogger(__name__)

TEMPLATE_KIND = "template"
TABLE_KIND = "table"


class StencilRegistry:
    """
    Owns every registered stencil, keyed by id and partitioned by kind.

    Template and table stencils live in separate namespaces, so the same id may
    name one of each. Stencils cannot be updated or removed once added.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._templates: Dict[str, TemplateStencil] = {}
        self._tables: Dict[str, TableStencil] = {}

    def add_template_stencil(
        self,
        stencil_id: str,
        template: str,
        colors: Optional[Mapping[str, str]] = None,
    ) -> TemplateStencil:
        """
        Register a template stencil.

        Raises:
            EmptyIDError: If ``stencil_id`` is empty.
            DuplicateIDError: If a template stencil already uses ``stencil_id``.
        """
        if not stencil_id:
            raise EmptyIDError(TEMPLATE_KIND)
        stencil = TemplateStencil(stencil_id, template, colors or {})
        with self._lock:
            if stencil_id in self._templates:
                raise DuplicateIDError(TEMPLATE_KIND, stencil_id)
            self._templates[stencil_id] = stencil
        logger.debug("Registered template stencil %r", stencil_id)
        return stencil

    def add_table_stencil(
        self,
        stencil_id: str,
        headers: Optional[Iterable[str]] = None,
        column_order: Optional[Iterable[str]] = None,
        colors: Optional[Mapping[str, str]] = None,
    ) -> TableStencil:
        """
        Register a table stencil.

        Raises:
            EmptyIDError: If ``stencil_id`` is empty.
            DuplicateIDError: If a table stencil already uses ``stencil_id``.
        """
        if not stencil_id:
            raise EmptyIDError(TABLE_KIND)
        stencil = TableStencil(
            stencil_id,
            tuple(headers or ()),
            tuple(column_order or ()),
            colors or {},
        )
        with self._lock:
            if stencil_id in self._tables:
                raise DuplicateIDError(TABLE_KIND, stencil_id)
            self._tables[stencil_id] = stencil
        logger.debug("Registered table stencil %r", stencil_id)
        return stencil

    def find_template_stencil(self, stencil_id: str) -> TemplateStencil:
        with self._lock:
            stencil = self._templates.get(stencil_id)
        if stencil is None:
            raise StencilNotFoundError(TEMPLATE_KIND, stencil_id)
        return stencil

    def find_table_stencil(self, stencil_id: str) -> TableStencil:
        with self._lock:
            stencil = self._tables.get(stencil_id)
        if stencil is None:
            raise StencilNotFoundError(TABLE_KIND, stencil_id)
        return stencil

    def template_stencil_ids(self) -> Tuple[str, ...]:
        """Ids of registered template stencils in registration order."""
        with self._lock:
            return tuple(self._templates)

    def table_stencil_ids(self) -> Tuple[str, ...]:
        """Ids of registered table stencils in registration order."""
        with self._lock:
            return tuple(self._tables)

    @property
    def template_count(self) -> int:
        return len(self._templates)

    @property
    def table_count(self) -> int:
        return len(self._tables)


__all__ = ["StencilRegistry", "TABLE_KIND", "TEMPLATE_KIND"]

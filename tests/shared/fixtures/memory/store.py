"""Versioned in-memory document store.

Every document carries a version number. A unit of work remembers the
version of each document it read or intends to write and commits only if
none of them moved in the meantime, which is the same optimistic protocol
the SQLAlchemy adapter gets from its version column.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional
from uuid import UUID

from budgetbook.domain.shared.exceptions import WriteConflictError

logger = logging.getLogger(__name__)

# Version recorded for a document that must not exist yet
ABSENT = 0

DocumentKey = tuple[str, UUID]


@dataclass(frozen=True)
class Document:
    value: Any
    version: int


class InMemoryLedgerStore:
    """Process-local store shared by all units of work of an application."""

    def __init__(self) -> None:
        self._documents: dict[DocumentKey, Document] = {}
        self._lock = asyncio.Lock()

    def get(self, key: DocumentKey) -> Optional[Document]:
        return self._documents.get(key)

    def version_of(self, key: DocumentKey) -> int:
        document = self._documents.get(key)
        return document.version if document else ABSENT

    def scan(self, collection: str) -> Iterator[tuple[UUID, Document]]:
        for (name, doc_id), document in list(self._documents.items()):
            if name == collection:
                yield doc_id, document

    async def apply(
        self,
        expected_versions: Mapping[DocumentKey, int],
        writes: Mapping[DocumentKey, Any],
    ) -> None:
        """
        Atomically apply ``writes`` if every expected version still holds.

        A write value of None deletes the document.

        Raises
        ------
        WriteConflictError
            If any document changed since it was read
        """
        async with self._lock:
            for key, expected in expected_versions.items():
                current = self.version_of(key)
                if current != expected:
                    logger.debug(
                        "Version mismatch on %s/%s: expected %d, found %d",
                        key[0],
                        key[1],
                        expected,
                        current,
                    )
                    raise WriteConflictError(
                        details={
                            "collection": key[0],
                            "id": str(key[1]),
                        },
                    )

            for key, value in writes.items():
                if value is None:
                    self._documents.pop(key, None)
                else:
                    self._documents[key] = Document(
                        value=value,
                        version=self.version_of(key) + 1,
                    )

    def clear(self) -> None:
        self._documents.clear()

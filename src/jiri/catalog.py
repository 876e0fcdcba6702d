"""Field catalog: bidirectional mapping between field ids and display names."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from jiri.tracker import IssueTracker


@dataclass(frozen=True)
class FieldCatalog:
    """Field id <-> display name lookup built from one catalog fetch."""

    id_to_name: dict[str, str] = field(default_factory=dict)
    name_to_id: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_pairs(cls, pairs: list[tuple[str, str]]) -> FieldCatalog:
        """Build a catalog from (id, name) pairs.

        Entries with an empty id or name are skipped. When two fields share a
        display name the later one wins in ``name_to_id``.

        Args:
            pairs: (id, name) pairs as returned by the tracker.

        Returns:
            FieldCatalog instance.
        """
        id_to_name: dict[str, str] = {}
        name_to_id: dict[str, str] = {}
        for field_id, name in pairs:
            if not field_id or not name:
                continue
            id_to_name[field_id] = name
            name_to_id[name.lower()] = field_id
        return cls(id_to_name=id_to_name, name_to_id=name_to_id)

    def name_for(self, field_id: str) -> str | None:
        return self.id_to_name.get(field_id)

    def id_for(self, name: str) -> str | None:
        return self.name_to_id.get(name.lower())


class FieldCatalogCache:
    """Lazily fetches the field catalog once and keeps it for its lifetime.

    A failed fetch is not cached, so a later ``lookup()`` retries.
    """

    def __init__(self, tracker: IssueTracker) -> None:
        self._tracker = tracker
        self._lock = threading.Lock()
        self._catalog: FieldCatalog | None = None

    def lookup(self) -> FieldCatalog:
        """Return the catalog, fetching it on first use.

        Raises:
            NetworkError: If the service cannot be reached.
            UpstreamError: If the service rejects the request.
        """
        with self._lock:
            if self._catalog is None:
                self._catalog = FieldCatalog.from_pairs(self._tracker.fetch_field_catalog())
            return self._catalog

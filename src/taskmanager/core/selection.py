# -*- coding: utf-8 -*-
"""Set of project ids checked in the list view."""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Iterator


class SelectionSet:
    """Track which project ids are currently selected."""

    def __init__(self, ids: Iterable[uuid.UUID] = ()) -> None:
        self._ids: set[uuid.UUID] = set(ids)

    def add(self, project_id: uuid.UUID) -> None:
        self._ids.add(project_id)

    def discard(self, project_id: uuid.UUID) -> None:
        self._ids.discard(project_id)

    def replace(self, ids: Iterable[uuid.UUID]) -> None:
        self._ids = set(ids)

    def clear(self) -> None:
        self._ids.clear()

    def all_selected(self, total: int) -> bool:
        """Size-based check against the number of projects in the store.

        Only valid while selected ids are a subset of the store ids and
        projects cannot be deleted.
        """
        return len(self._ids) == total

    def __contains__(self, project_id: object) -> bool:
        return project_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[uuid.UUID]:
        return iter(set(self._ids))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SelectionSet):
            return NotImplemented
        return self._ids == other._ids

    def __repr__(self) -> str:
        return f"SelectionSet({len(self._ids)} selected)"

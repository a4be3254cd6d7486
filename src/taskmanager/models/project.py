# -*- coding: utf-8 -*-
"""Project data model."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from typing import Any


@dataclass
class Project:
    """A named unit of work with a stable identifier."""

    name: str = ""
    description: str = ""
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def copy(self) -> "Project":
        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        return {"id": str(self.id), "name": self.name, "description": self.description}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Project":
        """Build a project from its serialized form.

        Raises ``KeyError``, ``TypeError`` or ``ValueError`` on malformed input.
        """
        name = data["name"]
        description = data["description"]
        if not isinstance(name, str) or not isinstance(description, str):
            raise TypeError("Project name and description must be strings")
        return cls(name=name, description=description, id=uuid.UUID(str(data["id"])))

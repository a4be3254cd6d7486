# -*- coding: utf-8 -*-
"""Per-field validation rules for the project form."""

from __future__ import annotations

from dataclasses import dataclass, field

from taskmanager.constants import NAME_REQUIRED_MESSAGE


@dataclass(frozen=True)
class FieldValidation:
    is_valid: bool = True
    message: str = ""


VALID = FieldValidation()


def validate_name(name: str) -> FieldValidation:
    if not name:
        return FieldValidation(is_valid=False, message=NAME_REQUIRED_MESSAGE)
    return VALID


def validate_description(description: str) -> FieldValidation:
    return VALID


@dataclass
class FormValidation:
    """Validation results for every field of the project form."""

    name: FieldValidation = field(default_factory=FieldValidation)
    description: FieldValidation = field(default_factory=FieldValidation)

    def reset(self) -> None:
        self.name = VALID
        self.description = VALID

    def is_valid(self) -> bool:
        return self.name.is_valid and self.description.is_valid

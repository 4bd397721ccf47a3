"""Action and form descriptors for editable resources."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FieldType(StrEnum):
    """Form field input types."""

    NUMBER = "number"
    TEXT = "text"
    HIDDEN = "hidden"


class FormField(BaseModel):
    """A single form input with its current value as default."""

    model_config = ConfigDict(extra="forbid")

    type: FieldType
    label: str = ""
    name: str
    value: str = ""

    @classmethod
    def number(cls, label: str, name: str, value: str) -> FormField:
        """Numeric input."""
        return cls(type=FieldType.NUMBER, label=label, name=name, value=value)

    @classmethod
    def text(cls, label: str, name: str, value: str) -> FormField:
        """Free text input."""
        return cls(type=FieldType.TEXT, label=label, name=name, value=value)

    @classmethod
    def hidden(cls, name: str, value: str) -> FormField:
        """Hidden metadata field submitted with the form."""
        return cls(type=FieldType.HIDDEN, name=name, value=value)


class Form(BaseModel):
    """Ordered list of form fields."""

    model_config = ConfigDict(extra="forbid")

    fields: list[FormField] = Field(default_factory=list)

    def values(self) -> dict[str, str]:
        """Map of field name to default value."""
        return {f.name: f.value for f in self.fields}


class Action(BaseModel):
    """Named action backed by a form.

    The hidden ``action`` field tells the consumer which update path handles
    the submitted form.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    title: str
    form: Form = Field(default_factory=Form)

    def to_wire(self) -> dict[str, Any]:
        """Serialize for the presentation layer."""
        return {
            "name": self.name,
            "title": self.title,
            "form": {"fields": [f.model_dump(mode="json") for f in self.form.fields]},
        }

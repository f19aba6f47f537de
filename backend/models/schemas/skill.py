"""Skill token: the normalized unit both scorers compare on."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_serializer, model_validator


def normalize_skill(text: str) -> str:
    """Lower-case and collapse whitespace. This is the canonical form."""
    return re.sub(r"\s+", " ", text.strip().lower())


class SkillToken(BaseModel):
    """A single skill, equal to another only on its canonical (lower-case) name.

    Validates from a bare string ("Spring Boot") and serializes to its
    display form, so API payloads stay flat lists of names.
    """
    model_config = ConfigDict(frozen=True)

    name: str

    @model_validator(mode="before")
    @classmethod
    def _from_text(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data}
        return data

    @field_validator("name")
    @classmethod
    def _normalize(cls, value: str) -> str:
        value = normalize_skill(value)
        if not value:
            raise ValueError("skill name must not be blank")
        return value

    @classmethod
    def of(cls, text: str) -> "SkillToken":
        return cls.model_validate(text)

    @property
    def display(self) -> str:
        # "spring boot" -> "Spring Boot", "node.js" -> "Node.js"
        return " ".join(word[:1].upper() + word[1:] for word in self.name.split(" "))

    @model_serializer
    def _serialize(self) -> str:
        return self.display

    def __str__(self) -> str:
        return self.display

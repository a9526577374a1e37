"""
Canonical résumé schema.

Wire names are camelCase (what the template and the JSON view show),
attributes are snake_case. Strings are strict: a number or a null where a
string belongs is reported rather than coerced.
"""
from __future__ import annotations
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from errors import SchemaError


class _Model(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ContactInfo(_Model):
    email: Optional[StrictStr] = None
    phone: Optional[StrictStr] = None
    location: Optional[StrictStr] = None
    linkedin: Optional[StrictStr] = None


class Experience(_Model):
    title: Optional[StrictStr] = None
    company: Optional[StrictStr] = None
    dates: Optional[StrictStr] = None
    achievements: List[StrictStr] = Field(default_factory=list)


class Education(_Model):
    degree: Optional[StrictStr] = None
    institution: Optional[StrictStr] = None
    major: Optional[StrictStr] = None
    dates: Optional[StrictStr] = None


class Project(_Model):
    name: StrictStr
    description: StrictStr


class Resume(_Model):
    name: Optional[StrictStr] = None
    contact_info: ContactInfo = Field(alias="contactInfo")
    summary: Optional[StrictStr] = None
    experience: Optional[List[Experience]] = None
    education: Optional[List[Education]] = None
    skills: List[StrictStr] = Field(default_factory=list)
    projects: Optional[List[Project]] = None
    certifications: Optional[List[StrictStr]] = None
    languages: Optional[List[StrictStr]] = None

    def to_json_dict(self) -> dict:
        """camelCase dict without absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


def validate(candidate: Any) -> Resume:
    """Check a normalised candidate; raise SchemaError on the first violation."""
    if isinstance(candidate, Resume):
        return candidate
    try:
        return Resume.model_validate(candidate)
    except ValidationError as exc:
        first = exc.errors()[0]
        path = ".".join(str(p) for p in first["loc"])
        raise SchemaError(path, first["msg"]) from exc

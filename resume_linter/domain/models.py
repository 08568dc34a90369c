"""Immutable document and diagnostic models shared by the parser, renderers and linters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class SectionKind(Enum):
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    CERTIFICATIONS = "certifications"
    OTHER = "other"


#: Section kinds whose content is split into structured records.
STRUCTURED_KINDS = frozenset({SectionKind.EXPERIENCE, SectionKind.EDUCATION, SectionKind.PROJECTS})


class Severity(Enum):
    PASS = "pass"
    WARNING = "warning"
    ERROR = "error"


class CheckCategory(Enum):
    FORMATTING = "formatting"
    CONTENT = "content"
    ATS = "ats"
    SPELLING = "spelling"


@dataclass(frozen=True)
class HeaderInfo:
    """Name and contact fields found in the first lines of a resume."""

    name: str
    phone: Optional[str] = None
    email: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None
    website: Optional[str] = None

    def contact_fields(self) -> Tuple[str, ...]:
        """Present contact values in display order."""
        values = (self.phone, self.email, self.location, self.linkedin, self.website)
        return tuple(v for v in values if v)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name}
        for key in ("phone", "email", "location", "linkedin", "website"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass(frozen=True)
class Item:
    """A resume entry: a job, degree, project, or a single skill token."""

    title: str
    subtitle: Optional[str] = None
    date_range: Optional[str] = None
    description: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"title": self.title}
        if self.subtitle is not None:
            data["subtitle"] = self.subtitle
        if self.date_range is not None:
            data["dateRange"] = self.date_range
        if self.description:
            data["description"] = list(self.description)
        return data


@dataclass(frozen=True)
class Section:
    kind: SectionKind
    title: str
    content: str
    items: Tuple[Item, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind.value,
            "title": self.title,
            "content": self.content,
            "items": [item.to_dict() for item in self.items],
        }


@dataclass(frozen=True)
class ParsedResume:
    """Structured view of a resume: header plus sections in source order."""

    header: HeaderInfo
    sections: Tuple[Section, ...] = ()

    @classmethod
    def empty(cls) -> "ParsedResume":
        return cls(header=HeaderInfo(name=""), sections=())

    def has_section(self, kind: SectionKind) -> bool:
        return any(s.kind is kind for s in self.sections)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "header": self.header.to_dict(),
            "sections": [section.to_dict() for section in self.sections],
        }


@dataclass(frozen=True)
class Diagnostic:
    """A linter finding. ``line_ref`` is 1-based when present."""

    severity: Severity
    message: str
    line_ref: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.severity.value, "message": self.message}
        if self.line_ref is not None:
            data["lineRef"] = self.line_ref
        return data


@dataclass(frozen=True)
class ATSCheck:
    severity: Severity
    category: CheckCategory
    message: str
    suggestion: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.severity.value,
            "category": self.category.value,
            "message": self.message,
        }
        if self.suggestion is not None:
            data["suggestion"] = self.suggestion
        return data


@dataclass(frozen=True)
class TextMetadata:
    word_count: int = 0
    line_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"wordCount": self.word_count, "lineCount": self.line_count}

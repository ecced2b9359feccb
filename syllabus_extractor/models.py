"""Outline data model: subjects, their chapters, and the extraction result."""

from dataclasses import dataclass, field

from syllabus_extractor.config import DEFAULT_SUBJECT_NAME


@dataclass
class Subject:
    name: str
    chapters: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"name": self.name, "chapters": list(self.chapters)}


@dataclass
class ExtractionResult:
    """Ordered subjects recovered from one document.

    Never empty once produced by finalize(): a document with no detectable
    structure yields a single placeholder subject with no chapters.
    """

    subjects: list[Subject] = field(default_factory=list)

    @property
    def nothing_detected(self) -> bool:
        """True when no subject carries any chapter."""
        return not any(s.chapters for s in self.subjects)

    @property
    def chapter_count(self) -> int:
        return sum(len(s.chapters) for s in self.subjects)

    def to_dict(self) -> dict:
        return {"subjects": [s.to_dict() for s in self.subjects]}

    @classmethod
    def placeholder(cls) -> "ExtractionResult":
        return cls(subjects=[Subject(DEFAULT_SUBJECT_NAME)])

from dataclasses import dataclass, field

DOCUMENT_TYPES = frozenset({"lab_report", "prescription", "unknown"})
ABNORMAL_STATUSES = frozenset({"H", "L"})

NOT_SPECIFIED = "Not specified"
PARSE_ERROR = "Parse error"


@dataclass(frozen=True)
class LabResult:
    """A single lab test line."""

    test: str
    value: str = ""
    reference_range: str = ""
    status: str | None = None  # "H", "L" or None for normal

    @property
    def is_abnormal(self) -> bool:
        return self.status in ABNORMAL_STATUSES

    def to_dict(self) -> dict[str, str | None]:
        return {
            "test": self.test,
            "value": self.value,
            "range": self.reference_range,
            "status": self.status,
        }


@dataclass(frozen=True)
class Medication:
    """A single prescribed medication."""

    name: str
    dosage: str = ""
    frequency: str = ""
    duration: str = ""
    instructions: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "dosage": self.dosage,
            "frequency": self.frequency,
            "duration": self.duration,
            "instructions": self.instructions,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Structured outcome of one analysis run.

    A degraded result (``error=True``) carries best-effort defaults and a
    truncated copy of the combined text in ``raw_text``.
    """

    document_type: str = "unknown"
    date: str = NOT_SPECIFIED
    doctor: str = NOT_SPECIFIED
    lab_results: list[LabResult] = field(default_factory=list)
    medications: list[Medication] = field(default_factory=list)
    documents_analyzed: int = 0
    summary: str = "No summary provided"
    raw_text: str | None = None
    error: bool = False

    @property
    def abnormal_flags(self) -> int:
        return sum(1 for result in self.lab_results if result.is_abnormal)

    def to_dict(self) -> dict[str, object]:
        """Render the JSON shape returned to API clients."""
        payload: dict[str, object] = {
            "type": self.document_type,
            "date": self.date,
            "doctor": self.doctor,
            "lab_results": [r.to_dict() for r in self.lab_results],
            "medications": [m.to_dict() for m in self.medications],
            "documents_analyzed": self.documents_analyzed,
            "summary": self.summary,
            "abnormal_flags": self.abnormal_flags,
        }
        if self.error:
            payload["raw_text"] = self.raw_text
            payload["error"] = True
        return payload

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AIReport:
    """Structured AI summary of a document. All fields are required."""

    purpose_and_scope: str
    summary: str
    highlights: list[str] = field(default_factory=list)
    issues: str = ""
    recommendations: str = ""

    def to_dict(self) -> dict[str, object]:
        """Serialize with the field names the model is asked to produce."""
        return {
            "purposeAndScope": self.purpose_and_scope,
            "summary": self.summary,
            "highlights": list(self.highlights),
            "issues": self.issues,
            "recommendations": self.recommendations,
        }

from enum import Enum

from docintake.utilities.exceptions import InvalidUtilityError


class UtilityType(str, Enum):
    """Kinds of values offered as choices when filling in document metadata."""

    CLASSIFICATION = "classification"
    DOCUMENT_TYPE = "document_type"
    SUMMARY_BASIS = "summary_basis"
    DIVISION_OFFICE = "division_office"
    DESTINATION_OFFICE = "destination_office"

    @classmethod
    def parse(cls, value: "str | UtilityType") -> "UtilityType":
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidUtilityError(f"Invalid utility type '{value}'") from exc

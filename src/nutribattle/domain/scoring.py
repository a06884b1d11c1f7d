"""Nutritional quality grade models."""

from enum import StrEnum

_GRADE_COLORS = {
    "A": "#038141",
    "B": "#85BB2F",
    "C": "#FECB02",
    "D": "#EE8100",
    "E": "#E63E11",
}

_GRADE_DESCRIPTIONS = {
    "A": "Excellent nutritional quality",
    "B": "Good nutritional quality",
    "C": "Average nutritional quality",
    "D": "Poor nutritional quality",
    "E": "Very poor nutritional quality",
}


class QualityGrade(StrEnum):
    """Nutri-Score style grade; letters compare in quality order, A best."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"

    @property
    def color(self) -> str:
        """Display color for the grade."""
        return _GRADE_COLORS[self.value]

    @property
    def description(self) -> str:
        """Human-readable quality label."""
        return _GRADE_DESCRIPTIONS[self.value]

"""
Report domain models.

Section identifiers, per-section results and the aggregate report.

Dependencies: pydantic, reqbot.core.diagram
System role: Report API contracts
"""

from enum import Enum

from pydantic import BaseModel, Field

from reqbot.core.diagram.diagram_schema import AnyDiagramWarning
from reqbot.models.common import FlowResult


class ReportSection(str, Enum):
    SUMMARY = "summary"
    DIAGRAM = "diagram"
    COST_ESTIMATION = "cost_estimation"
    REFERENCES = "references"


class SectionResult(FlowResult[str]):
    """
    Result of one report section.

    content is HTML for text sections and flowchart markup for the diagram.
    """

    warnings: list[AnyDiagramWarning] | None = Field(
        default=None,
        description="Diagram warnings, set only for a rendered diagram that had any",
    )


class ReportResult(BaseModel):
    """One independently resolved result per section."""

    summary: SectionResult
    diagram: SectionResult
    cost_estimation: SectionResult
    references: SectionResult

    def section(self, section: ReportSection) -> SectionResult:
        return getattr(self, section.value)

    @property
    def failed_sections(self) -> list[ReportSection]:
        return [section for section in ReportSection if not self.section(section).succeeded]


class ReportResponse(BaseModel):
    """Response schema for a generated report."""

    handoff_id: str
    report: ReportResult

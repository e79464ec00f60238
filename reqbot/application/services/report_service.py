"""
Report service.

Generates the four report sections concurrently from extracted
requirements and the conversation transcript. Each section resolves
independently: one failing section is reported as that section's error
and never hides the others.

Dependencies: reqbot.core.flows, reqbot.models.report
System role: Report generation orchestration layer
"""

import asyncio
import logging

from reqbot.core.exceptions import ReqBotException
from reqbot.core.flows.flow_schema import Requirement
from reqbot.core.flows.flows import ReqBotFlows
from reqbot.models.report import ReportResult, ReportSection, SectionResult

logger = logging.getLogger(__name__)

SECTION_ERRORS = {
    ReportSection.SUMMARY: "Failed to generate executive summary.",
    ReportSection.DIAGRAM: "Failed to generate activity diagram.",
    ReportSection.COST_ESTIMATION: "Failed to generate cost estimation.",
    ReportSection.REFERENCES: "Failed to generate references.",
}


class ReportService:
    """Report section fan-out over ReqBot flows."""

    def __init__(self, flows: ReqBotFlows) -> None:
        self.flows = flows

    async def generate_report(
        self,
        requirements: list[Requirement],
        transcript: str,
    ) -> ReportResult:
        """
        Generate every section concurrently.

        Args:
            requirements: Extracted requirements
            transcript: Formatted conversation transcript

        Returns:
            ReportResult: One SectionResult per section, successes preserved
                regardless of sibling failures
        """
        logger.info(
            f"{__name__}:generate_report - START requirements={len(requirements)}"
        )

        sections = list(ReportSection)
        results = await asyncio.gather(
            *(self.generate_section(section, requirements, transcript) for section in sections)
        )
        report = ReportResult(
            **{section.value: result for section, result in zip(sections, results)}
        )

        failed = report.failed_sections
        if failed:
            logger.warning(
                f"{__name__}:generate_report - Failed sections: "
                f"{', '.join(section.value for section in failed)}"
            )
        logger.info(f"{__name__}:generate_report - END failed={len(failed)}")
        return report

    async def generate_section(
        self,
        section: ReportSection,
        requirements: list[Requirement],
        transcript: str,
    ) -> SectionResult:
        """
        Generate a single section, capturing any failure as its error.

        Also the retry path for one section of an existing report.

        Args:
            section: Section to generate
            requirements: Extracted requirements
            transcript: Formatted conversation transcript

        Returns:
            SectionResult: Content on success, error message on failure
        """
        try:
            if section is ReportSection.SUMMARY:
                return SectionResult.ok(await self.flows.executive_summary(requirements))
            if section is ReportSection.DIAGRAM:
                rendered = await self.flows.activity_diagram(requirements)
                return SectionResult(
                    content=rendered.markup,
                    warnings=rendered.warnings or None,
                )
            if section is ReportSection.COST_ESTIMATION:
                return SectionResult.ok(await self.flows.cost_estimation(requirements))
            return SectionResult.ok(await self.flows.references(transcript))
        except ReqBotException as e:
            logger.error(f"{__name__}:generate_section - {section.value} failed: {e}")
            return SectionResult.fail(f"{SECTION_ERRORS[section]} {e.message}")
        except Exception as e:
            logger.exception(f"{__name__}:generate_section - {section.value} failed unexpectedly")
            return SectionResult.fail(f"{SECTION_ERRORS[section]} {type(e).__name__}: {e}")

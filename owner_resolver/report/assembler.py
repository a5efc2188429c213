import json
from collections.abc import Iterable

from owner_resolver.report.models import Report, ResolutionEntry


class ReportAssembler:
    """Builds the final path -> {uid, email} document."""

    def assemble(self, entries: Iterable[ResolutionEntry]) -> Report:
        """Key entries by their exact path string, in the order given.

        A repeated path keeps its first position and its latest value.
        """
        report: Report = {}
        for entry in entries:
            report[entry.path] = {"uid": entry.uid, "email": entry.email or ""}
        return report

    def render(self, report: Report) -> str:
        return render_json(report)


def render_json(document: object) -> str:
    """Serialize a document the way every stdout artifact is written."""
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from owner_resolver.ownership.models import OwnershipRecord
from owner_resolver.report.models import Report, ResolutionEntry
from owner_resolver.validation.path_validator import SkippedPath


@dataclass(slots=True)
class ResolutionContext:
    targets: list[str] = field(default_factory=list)
    records: list[OwnershipRecord] = field(default_factory=list)
    skipped: list[SkippedPath] = field(default_factory=list)
    entries: list[ResolutionEntry] = field(default_factory=list)
    report: Report = field(default_factory=dict)


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: ResolutionContext) -> ResolutionContext:
        raise NotImplementedError

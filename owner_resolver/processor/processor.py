from collections.abc import Sequence

from owner_resolver.config.settings import Settings
from owner_resolver.directory.base import BaseDirectoryResolver
from owner_resolver.directory.factory import DirectoryResolverFactory
from owner_resolver.ownership.base import BaseOwnerUidReader
from owner_resolver.ownership.extractor import OwnershipExtractor
from owner_resolver.ownership.factory import UidReaderFactory
from owner_resolver.processor.pipeline import PipelineStep, ResolutionContext
from owner_resolver.processor.steps import (
    AssembleReportStep,
    CheckConnectionStep,
    ExtractOwnershipStep,
    LoadUidMapStep,
    ResolveIdentitiesStep,
)
from owner_resolver.report.assembler import ReportAssembler
from owner_resolver.report.models import Report


class Processor:
    """Runs the resolution steps in order and returns the finished report.

    Any exception from a step propagates; nothing is rendered for a run
    that did not complete.
    """

    def __init__(self, steps: Sequence[PipelineStep]) -> None:
        self._steps = list(steps)

    def process(self, targets: Sequence[str] = ()) -> Report:
        context = ResolutionContext(targets=list(targets))
        for step in self._steps:
            context = step.run(context)
        return context.report


def build_single_stage_processor(
    settings: Settings,
    resolver: BaseDirectoryResolver | None = None,
    reader: BaseOwnerUidReader | None = None,
) -> Processor:
    """Extraction and resolution in this process: connect -> extract -> resolve -> assemble."""
    resolver = resolver if resolver is not None else DirectoryResolverFactory.create(settings)
    reader = reader if reader is not None else UidReaderFactory.create(settings)
    return Processor(
        steps=[
            CheckConnectionStep(resolver),
            ExtractOwnershipStep(OwnershipExtractor(reader)),
            ResolveIdentitiesStep(resolver),
            AssembleReportStep(ReportAssembler()),
        ]
    )


def build_two_stage_processor(
    settings: Settings,
    uid_map_text: str,
    resolver: BaseDirectoryResolver | None = None,
) -> Processor:
    """Resolution only, fed by a UID map from the host: connect -> load -> resolve -> assemble."""
    resolver = resolver if resolver is not None else DirectoryResolverFactory.create(settings)
    return Processor(
        steps=[
            CheckConnectionStep(resolver),
            LoadUidMapStep(uid_map_text),
            ResolveIdentitiesStep(resolver),
            AssembleReportStep(ReportAssembler()),
        ]
    )

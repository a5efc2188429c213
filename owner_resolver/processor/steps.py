from owner_resolver.directory.base import BaseDirectoryResolver
from owner_resolver.directory.models import ResolutionStatus
from owner_resolver.logging.logger import Log
from owner_resolver.ownership.extractor import OwnershipExtractor
from owner_resolver.processor.pipeline import PipelineStep, ResolutionContext
from owner_resolver.report.assembler import ReportAssembler
from owner_resolver.report.models import ResolutionEntry
from owner_resolver.report.uid_map import parse_uid_map


class CheckConnectionStep(PipelineStep):
    def __init__(self, resolver: BaseDirectoryResolver) -> None:
        self._resolver = resolver

    def run(self, context: ResolutionContext) -> ResolutionContext:
        Log.info("Testing LDAP connection...")
        self._resolver.check_connection()
        Log.info("LDAP connection successful")
        return context


class ExtractOwnershipStep(PipelineStep):
    def __init__(self, extractor: OwnershipExtractor) -> None:
        self._extractor = extractor

    def run(self, context: ResolutionContext) -> ResolutionContext:
        result = self._extractor.extract(context.targets)
        context.records = result.records
        context.skipped = result.skipped
        Log.info(
            f"Found {len(result.records)} directories, skipped {len(result.skipped)}"
        )
        return context


class LoadUidMapStep(PipelineStep):
    """Reads ownership records from the host-side scan instead of the local filesystem."""

    def __init__(self, uid_map_text: str) -> None:
        self._uid_map_text = uid_map_text

    def run(self, context: ResolutionContext) -> ResolutionContext:
        context.records = parse_uid_map(self._uid_map_text)
        context.targets = [record.path for record in context.records]
        Log.info(f"Loaded {len(context.records)} entries from UID map")
        return context


class ResolveIdentitiesStep(PipelineStep):
    def __init__(self, resolver: BaseDirectoryResolver) -> None:
        self._resolver = resolver

    def run(self, context: ResolutionContext) -> ResolutionContext:
        entries: list[ResolutionEntry] = []
        for record in context.records:
            identity = self._resolver.lookup(record.uid)
            if identity.status is ResolutionStatus.FOUND:
                Log.info(f"  {record.path}: UID {record.uid} resolved to {identity.email}")
            elif identity.status is ResolutionStatus.NO_EMAIL:
                Log.info(f"  {record.path}: UID {record.uid} has an LDAP entry without mail")
            elif identity.status is ResolutionStatus.NO_ENTRY:
                Log.info(f"  {record.path}: no LDAP entry found for UID {record.uid}")
            else:
                Log.warning(f"  {record.path}: lookup for UID {record.uid} failed")
            entries.append(
                ResolutionEntry(path=record.path, uid=record.uid, email=identity.email)
            )
        context.entries = entries
        return context


class AssembleReportStep(PipelineStep):
    def __init__(self, assembler: ReportAssembler) -> None:
        self._assembler = assembler

    def run(self, context: ResolutionContext) -> ResolutionContext:
        context.report = self._assembler.assemble(context.entries)
        return context

import sys
from typing import TextIO

import click
from pydantic import ValidationError

from owner_resolver.config.settings import Settings
from owner_resolver.directory.exceptions import DirectoryConnectionError
from owner_resolver.directory.factory import DirectoryResolverFactory
from owner_resolver.logging.logger import Log
from owner_resolver.ownership.extractor import OwnershipExtractor
from owner_resolver.ownership.factory import UidReaderFactory
from owner_resolver.processor.processor import (
    Processor,
    build_single_stage_processor,
    build_two_stage_processor,
)
from owner_resolver.report.assembler import ReportAssembler
from owner_resolver.report.exceptions import UidMapFormatError
from owner_resolver.report.uid_map import render_uid_map
from owner_resolver.topology.exceptions import TopologyError
from owner_resolver.topology.selector import Topology, TopologySelector

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _load_settings() -> Settings:
    try:
        settings = Settings()
    except ValidationError as exc:
        click.echo(f"Error: invalid configuration:\n{exc}", err=True)
        sys.exit(1)
    Log.configure(settings.log_level)
    return settings


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "--uid-map",
    "uid_map",
    type=click.File("r"),
    default=None,
    help="UID map from scan-uids ('-' for stdin). Selects two-stage mode.",
)
@click.argument("paths", nargs=-1)
def resolve(uid_map: TextIO | None, paths: tuple[str, ...]) -> None:
    """Resolve the owners of directories PATHS to email addresses via LDAP.

    Prints a JSON object {path: {"uid": N, "email": "..."}} on stdout.

    \b
    Environment:
      LDAP_URL        LDAP server URL (default: ldap://localhost:389)
      LDAP_BIND_DN    bind DN
      LDAP_BIND_PASS  bind password
      LDAP_BASE_DN    search base DN
      TOPOLOGY        single-stage (default), two-stage or auto
    """
    settings = _load_settings()
    try:
        reader = UidReaderFactory.create(settings)
        topology = TopologySelector(settings, reader).select(uid_map_given=uid_map is not None)
    except (ValueError, TopologyError) as exc:
        Log.error(str(exc))
        sys.exit(1)

    uid_map_text: str | None = None
    if topology is Topology.SINGLE_STAGE:
        if not paths:
            raise click.UsageError("at least one directory is required")
    else:
        if paths:
            raise click.UsageError(
                "directories are scanned on the host in two-stage mode; "
                "pass the scan-uids output via --uid-map or stdin"
            )
        uid_map_text = (uid_map or click.get_text_stream("stdin")).read()

    Log.info("=== Data Owner Resolver ===")
    Log.info(f"Topology: {topology.value}")
    with DirectoryResolverFactory.create(settings) as resolver:
        processor: Processor
        if uid_map_text is None:
            processor = build_single_stage_processor(settings, resolver=resolver, reader=reader)
        else:
            processor = build_two_stage_processor(settings, uid_map_text, resolver=resolver)
        try:
            report = processor.process(paths)
        except (DirectoryConnectionError, UidMapFormatError) as exc:
            Log.error(f"Error: {exc}")
            sys.exit(1)

    click.echo(ReportAssembler().render(report), nl=False)
    Log.info("=== Resolution Complete ===")


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument("paths", nargs=-1, required=True)
def scan_uids(paths: tuple[str, ...]) -> None:
    """Host-side scan: print {path: uid} for directories PATHS as JSON.

    Run this where true host UIDs are visible and feed the output to
    `resolve --uid-map -` in the resolution-only context.
    """
    settings = _load_settings()
    try:
        reader = UidReaderFactory.create(settings)
    except ValueError as exc:
        Log.error(str(exc))
        sys.exit(1)

    Log.info("Scanning directories for ownership...")
    result = OwnershipExtractor(reader).extract(paths)
    Log.info(f"Found {len(result.records)} directories")
    click.echo(render_uid_map(result.records), nl=False)


if __name__ == "__main__":
    resolve()

from enum import Enum

from owner_resolver.config.settings import Settings
from owner_resolver.logging.logger import Log
from owner_resolver.ownership.base import BaseOwnerUidReader
from owner_resolver.ownership.exceptions import OwnershipReadError
from owner_resolver.topology.exceptions import TopologyError


class Topology(str, Enum):
    SINGLE_STAGE = "single-stage"
    TWO_STAGE = "two-stage"


class TopologySelector:
    """Decides once per run where owner UIDs are read.

    Single-stage reads them here, which is only correct when this context
    sees true host UIDs (privileged pod, hostPath mount). Two-stage trusts a
    UID map produced on the host, because container UID-namespace remapping
    would otherwise shift every UID.

    ``auto`` compares the observed owner of a probe directory with the UID
    it is known to have on the host.
    """

    MODES = ("single-stage", "two-stage", "auto")

    def __init__(self, settings: Settings, reader: BaseOwnerUidReader) -> None:
        self._settings = settings
        self._reader = reader

    def select(self, uid_map_given: bool = False) -> Topology:
        if uid_map_given:
            return Topology.TWO_STAGE
        mode = self._settings.topology.lower()
        if mode == "single-stage":
            return Topology.SINGLE_STAGE
        if mode == "two-stage":
            return Topology.TWO_STAGE
        if mode == "auto":
            return self._probe()
        raise TopologyError(f"Unknown topology '{mode}'. Choose from: {list(self.MODES)}")

    def _probe(self) -> Topology:
        probe_path = self._settings.topology_probe_path
        expected_uid = self._settings.topology_probe_uid
        if not probe_path or expected_uid is None:
            raise TopologyError(
                "topology=auto requires TOPOLOGY_PROBE_PATH and TOPOLOGY_PROBE_UID"
            )
        try:
            observed_uid = self._reader.read_uid(probe_path)
        except OwnershipReadError as exc:
            raise TopologyError(f"Cannot read topology probe {probe_path}: {exc}") from exc
        if observed_uid == expected_uid:
            Log.info(f"Probe {probe_path} shows host UID {observed_uid}; using single-stage")
            return Topology.SINGLE_STAGE
        Log.info(
            f"Probe {probe_path} shows UID {observed_uid}, expected {expected_uid}; "
            "UIDs are remapped here, using two-stage"
        )
        return Topology.TWO_STAGE

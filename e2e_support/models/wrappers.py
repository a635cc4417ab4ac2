from dataclasses import field
from pydantic.dataclasses import dataclass

from e2e_support.models.db_cluster_snapshot import DBClusterSnapshot

@dataclass(frozen=True)
class DBClusterSnapshotsResponse:
    DBClusterSnapshots: list[DBClusterSnapshot] = field(default_factory=list)

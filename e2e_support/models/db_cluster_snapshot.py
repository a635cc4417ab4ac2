from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class DBClusterSnapshot:
    DBClusterSnapshotIdentifier: str = ""
    DBClusterIdentifier: str = ""

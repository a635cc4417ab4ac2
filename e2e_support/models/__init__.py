from .db_cluster_snapshot import DBClusterSnapshot
from .provisioned_resources import ProvisionedResources
from .stack_output import StackOutput
from .wrappers import DBClusterSnapshotsResponse

__all__ = [
    "DBClusterSnapshot",
    "DBClusterSnapshotsResponse",
    "ProvisionedResources",
    "StackOutput",
]

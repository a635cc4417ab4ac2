import logging
import re

from pydantic import TypeAdapter

from e2e_support.clients.shell_client import CommandError, ShellClient
from e2e_support.models import DBClusterSnapshotsResponse, StackOutput

logger = logging.getLogger(__name__)

_stack_outputs_adapter = TypeAdapter(list[StackOutput] | None)
_snapshots_adapter = TypeAdapter(DBClusterSnapshotsResponse)
_INTEGER = re.compile(r"[+-]?[0-9]+")


class SnapshotCleanupError(RuntimeError):
    def __init__(self, failed: list[str]):
        super().__init__(f"Failed to delete cluster snapshots: {', '.join(failed)}")
        self.failed: list[str] = failed


class AWSClient:
    """Wrapper around `aws` CLI commands used to set up and tear down e2e resources."""

    def __init__(self, shell: ShellClient | None = None, region: str | None = None, profile: str | None = None):
        self.shell: ShellClient = shell or ShellClient()
        self.region: str | None = region
        self.profile: str | None = profile

    def create_stack(self, name: str, template_path: str) -> None:
        """aws cloudformation create-stack --stack-name $name --template-body $template_path"""
        command = " ".join([
            "cloudformation",
            "create-stack",
            "--stack-name", name,
            "--template-body", template_path,
        ])
        self._exec(command)

    def wait_stack_create_complete(self, name: str) -> None:
        command = " ".join([
            "cloudformation",
            "wait",
            "stack-create-complete",
            "--stack-name", name,
        ])
        self._exec(command)

    def vpc_stack_output(self, name: str) -> list[StackOutput]:
        """aws cloudformation describe-stacks --stack-name $name | jq -r '.Stacks[0].Outputs'"""
        command = " ".join([
            "cloudformation",
            "describe-stacks",
            "--stack-name", name,
            "|",
            "jq", "-r", "'.Stacks[0].Outputs'",
        ])
        out = self._exec(command, capture_output=True)
        # a stack without outputs yields `null`
        return _stack_outputs_adapter.validate_json(out) or []

    def delete_stack(self, name: str) -> None:
        command = " ".join([
            "cloudformation",
            "delete-stack",
            "--stack-name", name,
        ])
        self._exec(command)

    def wait_stack_delete_complete(self, name: str) -> None:
        command = " ".join([
            "cloudformation",
            "wait",
            "stack-delete-complete",
            "--stack-name", name,
        ])
        self._exec(command)

    def create_ecr_repo(self, name: str) -> str:
        """aws ecr create-repository --repository-name $name | jq -r .repository.repositoryUri"""
        command = " ".join([
            "ecr",
            "create-repository",
            "--repository-name", name,
            "|",
            "jq", "-r", ".repository.repositoryUri",
        ])
        return self._exec(command, capture_output=True).strip()

    def ecr_login_password(self) -> str:
        command = " ".join([
            "ecr",
            "get-login-password",
        ])
        return self._exec(command, capture_output=True).strip()

    def delete_ecr_repo(self, name: str) -> None:
        command = " ".join([
            "ecr",
            "delete-repository",
            "--repository-name", name,
            "--force",
        ])
        self._exec(command)

    def get_file_system_size(self) -> int:
        """Size in bytes of the first file system returned by `aws efs describe-file-systems`."""
        command = " ".join([
            "efs",
            "describe-file-systems",
            "|",
            "jq", "-r", "'.FileSystems[0].SizeInBytes.Value'",
        ])
        out = self._exec(command, capture_output=True).strip()
        # int() alone would also take "1_000" and non-ASCII digits
        if not _INTEGER.fullmatch(out):
            raise ValueError(f"File system size is not a number: {out!r}")
        return int(out)

    def delete_all_db_cluster_snapshots(self, continue_on_error: bool = False) -> None:
        """
        Remove every manual RDS cluster snapshot so test runs do not hit the snapshot quota.

        The first failing deletion aborts the loop unless `continue_on_error` is set, in which
        case every snapshot is attempted and a `SnapshotCleanupError` names the ones left behind.
        """
        command = " ".join([
            "rds",
            "describe-db-cluster-snapshots",
            "--snapshot-type", "manual",
        ])
        out = self._exec(command, capture_output=True)
        response = _snapshots_adapter.validate_json(out)

        failed: list[str] = []
        for snapshot in response.DBClusterSnapshots:
            delete_command = " ".join([
                "rds",
                "delete-db-cluster-snapshot",
                "--db-cluster-snapshot-identifier",
                snapshot.DBClusterSnapshotIdentifier,
            ])
            try:
                self._exec(delete_command)
            except CommandError:
                if not continue_on_error:
                    raise
                logger.warning(f"Could not delete snapshot {snapshot.DBClusterSnapshotIdentifier} of cluster {snapshot.DBClusterIdentifier}")
                failed.append(snapshot.DBClusterSnapshotIdentifier)

        if failed:
            raise SnapshotCleanupError(failed)

    def _exec(self, command: str, capture_output: bool = False) -> str:
        tokens = ["aws"]
        if self.region:
            tokens += ["--region", self.region]
        if self.profile:
            tokens += ["--profile", self.profile]
        tokens.append(command)
        full_command = " ".join(tokens)
        logger.info(f"Running: {full_command}")
        return self.shell.exec(full_command, capture_output=capture_output)

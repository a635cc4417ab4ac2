import os
import subprocess
import logging

logger = logging.getLogger(__name__)


class CommandError(RuntimeError):
    def __init__(self, command: str, returncode: int):
        super().__init__(f"Command `{command}` failed with code {returncode}")
        self.command: str = command
        self.returncode: int = returncode


class ShellClient:
    """Runs command lines through bash so that pipes to jq work as written."""

    def exec(self, command: str, capture_output: bool = False) -> str:
        cmd = ["bash", "-o", "pipefail", "-c", command]
        result = subprocess.run(
            cmd,
            check=False,
            env=os.environ,
            stdout=subprocess.PIPE if capture_output else None,
            text=True,
        )
        if result.returncode != 0:
            logger.error(f"Command failed with code {result.returncode}")
            raise CommandError(command, result.returncode)
        if not capture_output:
            return ""
        return result.stdout

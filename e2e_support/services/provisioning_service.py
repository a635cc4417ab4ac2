import logging
from typing import override

from e2e_support.clients.aws_client import AWSClient
from e2e_support.repositories import ResourceRepository
from e2e_support.services.service import Service
from e2e_support.utils.logging import setup_logger


class ProvisioningService(Service):
    def __init__(
        self,
        manifest_path: str,
        stack_name: str,
        template_path: str,
        repository_name: str | None = None,
        region: str | None = None,
        profile: str | None = None,
        dry_run: bool = False,
        aws: AWSClient | None = None,
    ):
        self.aws: AWSClient = aws or AWSClient(region=region, profile=profile)
        self.repo: ResourceRepository = ResourceRepository(manifest_path)
        self.logger: logging.Logger = setup_logger("ProvisioningService")
        self.stack_name: str = stack_name
        self.template_path: str = template_path
        self.repository_name: str | None = repository_name
        self.dry_run: bool = dry_run

    @override
    def run(self) -> None:
        if not self.stack_name:
            raise ValueError("Stack name must not be empty")

        if self.dry_run:
            self.logger.info(f"Dry run mode. stack {self.stack_name} from {self.template_path} has not been created")
            if self.repository_name:
                self.logger.info(f"Dry run mode. ECR repository {self.repository_name} has not been created")
            return

        self.provision_stack()
        if self.repository_name:
            self.provision_repository()

    def provision_stack(self) -> None:
        template_body = self.template_path
        if not template_body.startswith("file://"):
            template_body = f"file://{template_body}"
        self.aws.create_stack(self.stack_name, template_body)
        # recorded before waiting so that a failed creation still gets torn down
        self.repo.add_stack(self.stack_name)
        self.aws.wait_stack_create_complete(self.stack_name)
        self.logger.info(f"Created stack {self.stack_name}")
        for output in self.aws.vpc_stack_output(self.stack_name):
            self.logger.info(f"{self.stack_name} output {output.OutputKey}={output.OutputValue}")

    def provision_repository(self) -> None:
        uri = self.aws.create_ecr_repo(self.repository_name)
        self.repo.add_repository(self.repository_name)
        self.logger.info(f"Created ECR repository {self.repository_name} at {uri}")

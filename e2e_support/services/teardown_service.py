import logging
from typing import override

from e2e_support.clients.aws_client import AWSClient
from e2e_support.repositories import ResourceRepository
from e2e_support.services.service import Service
from e2e_support.utils.logging import setup_logger


class TeardownService(Service):
    def __init__(
        self,
        manifest_path: str,
        delete_snapshots: bool = False,
        continue_on_error: bool = False,
        region: str | None = None,
        profile: str | None = None,
        dry_run: bool = False,
        aws: AWSClient | None = None,
    ):
        self.aws: AWSClient = aws or AWSClient(region=region, profile=profile)
        self.repo: ResourceRepository = ResourceRepository(manifest_path)
        self.logger: logging.Logger = setup_logger("TeardownService")
        self.delete_snapshots: bool = delete_snapshots
        self.continue_on_error: bool = continue_on_error
        self.dry_run: bool = dry_run

    @override
    def run(self) -> None:
        resources = self.repo.find_all()
        if not resources.stacks and not resources.repositories and not self.delete_snapshots:
            self.logger.info("No provisioned resources found")
            return

        # later stacks may import outputs of earlier ones
        for stack in reversed(resources.stacks):
            self.teardown_stack(stack)

        for repository in resources.repositories:
            self.teardown_repository(repository)

        if self.delete_snapshots:
            if self.dry_run:
                self.logger.info("Dry run mode. manual cluster snapshots have not been deleted")
            else:
                self.aws.delete_all_db_cluster_snapshots(continue_on_error=self.continue_on_error)
                self.logger.info("Deleted manual cluster snapshots")

    def teardown_stack(self, name: str) -> None:
        if self.dry_run:
            self.logger.info(f"Dry run mode. stack {name} has not been deleted")
            return
        self.aws.delete_stack(name)
        self.aws.wait_stack_delete_complete(name)
        self.repo.remove_stack(name)
        self.logger.info(f"Deleted stack {name}")

    def teardown_repository(self, name: str) -> None:
        if self.dry_run:
            self.logger.info(f"Dry run mode. ECR repository {name} has not been deleted")
            return
        self.aws.delete_ecr_repo(name)
        self.repo.remove_repository(name)
        self.logger.info(f"Deleted ECR repository {name}")

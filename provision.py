#!/usr/bin/env python3
import argparse
import os
import sys
from e2e_support.services.provisioning_service import ProvisioningService
from e2e_support.utils.logging import setup_logger

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


def main():
    parser = argparse.ArgumentParser(description="Provision AWS resources for an e2e test run")
    parser.add_argument('--stack-name', required=True, help='Name of the CloudFormation stack to create')
    parser.add_argument('--template', required=True, help='Path to the CloudFormation template')
    parser.add_argument('--repository-name', help='Also create an ECR repository with this name')
    parser.add_argument('--region', default=os.environ.get("AWS_E2E_REGION"), help='AWS region')
    parser.add_argument('--profile', default=os.environ.get("AWS_E2E_PROFILE"), help='AWS CLI profile')
    parser.add_argument('--dry-run', action='store_true', help='Run in dry-run mode without making any changes')
    args = parser.parse_args()
    logger = setup_logger("Provision")
    try:
        resources_file = os.environ.get("RESOURCES_FILE", f"{ROOT_DIR}/e2e-resources.yaml")
        logger.info(f"Provisioning stack {args.stack_name}, recording resources in {resources_file}")
        service = ProvisioningService(
            resources_file,
            args.stack_name,
            args.template,
            repository_name=args.repository_name,
            region=args.region,
            profile=args.profile,
            dry_run=args.dry_run,
        )
        service.run()
        logger.info("Provisioning completed successfully")
        return 0
    except Exception as e:
        logger.error(f"Provisioning failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

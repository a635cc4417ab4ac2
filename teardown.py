#!/usr/bin/env python3
import argparse
import os
import sys
from e2e_support.services.teardown_service import TeardownService
from e2e_support.utils.logging import setup_logger

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


def main():
    parser = argparse.ArgumentParser(description="Tear down AWS resources left by an e2e test run")
    parser.add_argument('--delete-snapshots', action='store_true', help='Also delete all manual RDS cluster snapshots')
    parser.add_argument('--continue-on-error', action='store_true', help='Keep deleting snapshots after a failed deletion')
    parser.add_argument('--region', default=os.environ.get("AWS_E2E_REGION"), help='AWS region')
    parser.add_argument('--profile', default=os.environ.get("AWS_E2E_PROFILE"), help='AWS CLI profile')
    parser.add_argument('--dry-run', action='store_true', help='Run in dry-run mode without making any changes')
    args = parser.parse_args()

    logger = setup_logger("Teardown")

    try:
        resources_file = os.environ.get("RESOURCES_FILE", f"{ROOT_DIR}/e2e-resources.yaml")
        logger.info(f"Starting teardown with resources file: {resources_file}")
        service = TeardownService(
            resources_file,
            delete_snapshots=args.delete_snapshots,
            continue_on_error=args.continue_on_error,
            region=args.region,
            profile=args.profile,
            dry_run=args.dry_run,
        )
        service.run()
        logger.info("Teardown completed successfully")
        return 0
    except Exception as e:
        logger.error(f"Teardown failed: {e}")
        return 1

if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
import argparse
import os
import sys
from buildrun.repositories import PipelineConfigRepository
from buildrun.services.pipeline_service import PipelineService
from buildrun.utils.logging import setup_logger

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Build, package and launch a service")
    parser.add_argument('--skip-tests', action='store_true', default=None, help='Do not run tests during the build')
    parser.add_argument('--port', type=int, default=None, help='TCP port the service listens on (default 8080)')
    args = parser.parse_args(argv)
    logger = setup_logger("BuildAndRun")

    pipeline_file = os.environ.get("PIPELINE_FILE", f"{ROOT_DIR}/pipeline.yaml")
    logger.info(f"Starting pipeline with config file: {pipeline_file}")
    try:
        config = PipelineConfigRepository(pipeline_file).find()
        config = config.with_overrides(skip_tests=args.skip_tests, port=args.port)
        service = PipelineService(config)
    except ValueError as e:
        logger.error(f"Pipeline configuration failed: {e}")
        return 1

    result = service.run()
    if result.exit_code == 0:
        logger.info(f"Service {result.artifact.name} launched with pid {result.handle.pid} on port {result.handle.port}")
    else:
        logger.error(f"Pipeline ended in state {result.state.value} with exit code {result.exit_code}")
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())

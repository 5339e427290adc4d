#!/usr/bin/env python3
import sys
from docker_wrapper.docker_handler import DockerHandler
from docker_wrapper.run_modules.builtin import build_registry
from docker_wrapper.utils.logging import logger, setup_logger

def main():
    """
    Main entry point for the docker wrapper.
    Runs the registered run modules and execs the real docker binary.
    """
    try:
        setup_logger()
        logger.debug("docker-wrapper starting, intercepting command: %s", " ".join(sys.argv))
        handler = DockerHandler(build_registry())
        handler.intercept_command(sys.argv[1:])
    except Exception as e:
        logger.error(f"Fatal error: {str(e)}")
        sys.exit(1)

if __name__ == "__main__":
    main()

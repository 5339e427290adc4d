#!/usr/bin/env python3
import argparse
import logging
import os
import sys
from docker_wrapper.run_modules.builtin import build_registry
from docker_wrapper.utils.config import get_config_path, read_config, write_config
from docker_wrapper.utils.constants import ENV_DEBUG, ENV_LOG_FILE, ENV_LOG_LEVEL, PROGRAM_NAME, VERSION
from docker_wrapper.utils.logging import logger, setup_logger

HELP_TEXT = '''docker-wrapper CLI - configure the docker wrapper

Commands:
  log                  Configure logging settings
  modules              List enabled run modules in execution order
  version              Print the wrapper version

Logging Configuration:
  --level LEVEL        Set log level (DEBUG, INFO, WARNING, ERROR)
  --file FILE          Set log file path
  --debug on|off       Send everything to stderr at DEBUG level

Examples:
  docker-wrapper-cli log --level DEBUG --file /var/log/docker-wrapper.log
  docker-wrapper-cli modules
'''

def parse_args(args=None):
    """Parse command line arguments.

    Args:
        args: Optional list of arguments. If None, uses sys.argv[1:].
    """
    parser = argparse.ArgumentParser(
        description=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    subparsers = parser.add_subparsers(dest='command')

    log_parser = subparsers.add_parser('log')
    log_parser.add_argument('--level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    log_parser.add_argument('--file')
    log_parser.add_argument('--debug', choices=['on', 'off'])

    subparsers.add_parser('modules')
    subparsers.add_parser('version')

    return parser.parse_args(args)

def configure_logging(args) -> bool:
    """Update the logging keys of the config file, keeping every other key."""
    config_path = get_config_path()
    config = read_config(config_path)

    if args.level:
        config[ENV_LOG_LEVEL] = args.level
    if args.file:
        config[ENV_LOG_FILE] = os.path.abspath(args.file)
    if args.debug:
        config[ENV_DEBUG] = "1" if args.debug == 'on' else "0"

    try:
        write_config(config, config_path)
    except PermissionError:
        logger.error("Permission denied: Cannot write to %s. Try running with sudo.", config_path)
        return False

    logger.info("Logging configured - level: %s, file: %s, debug: %s",
                config.get(ENV_LOG_LEVEL, 'not changed'),
                config.get(ENV_LOG_FILE, 'not changed'),
                config.get(ENV_DEBUG, 'not changed'))
    return True

def list_modules():
    """Print enabled modules in the order they run."""
    for module in build_registry().sorted_modules():
        name = getattr(module, 'name', type(module).__name__)
        print(f"{module.priority():>5}  {name}")

def main():
    args = parse_args()
    setup_logger(level=logging.INFO, debug=True)

    if args.command == 'log':
        return 0 if configure_logging(args) else 1
    if args.command == 'modules':
        list_modules()
        return 0
    if args.command == 'version':
        print(f"{PROGRAM_NAME} version: {VERSION}")
        return 0

    logger.error("Invalid command. Use 'docker-wrapper-cli log|modules|version'")
    return 1

if __name__ == '__main__':
    sys.exit(main())

import logging
import sys
from typing import List, NoReturn, Optional
from docker_wrapper.docker_command_parser import DockerCommandParser, is_docker_run_command
from docker_wrapper.errors import DockerArgumentError
from docker_wrapper.run_modules.registry import RunModulePipeline, RunModuleRegistry
from docker_wrapper.utils.config import is_debug_enabled
from docker_wrapper.utils.constants import HELP_TEXT, PROGRAM_NAME, RUN_COMMAND, VERSION
from docker_wrapper.utils.logging import logger, setup_logger
from docker_wrapper.utils.process import docker_exec

def inject_run_args(args: List[str], inject_args: List[str]) -> List[str]:
    """Insert inject_args right after the "run" token of args.

    The last "run" wins when there are several. Without any "run" token the
    arguments come back unchanged. A new list is always returned.
    """
    if not inject_args:
        return list(args)

    logger.debug("request to inject args: %r", inject_args)

    run_index = -1
    for i, arg in enumerate(args):
        if arg == RUN_COMMAND:
            run_index = i

    if run_index == -1:
        # something funny, not docker run?
        return list(args)

    return list(args[:run_index + 1]) + list(inject_args) + list(args[run_index + 1:])

class DockerHandler:
    def __init__(self, registry: Optional[RunModuleRegistry] = None):
        self.registry = registry if registry is not None else RunModuleRegistry()
        self.pipeline = RunModulePipeline(self.registry)
        self.parser = DockerCommandParser()
        logger.debug("DockerHandler initialized with %d run modules", len(self.registry))

    def _parse(self, args: List[str]) -> None:
        try:
            self.parser.parse_command_line_args(args)
        except DockerArgumentError as e:
            # only worth a warning for docker run, otherwise docker itself reports bad args
            if is_docker_run_command(args):
                logger.warning("%s", str(e))

    def _print_wrapper_info(self) -> None:
        flags = self.parser.flags
        if flags.help:
            print(HELP_TEXT)
        if flags.version:
            print(f"{PROGRAM_NAME} version: {VERSION}")

    def build_docker_args(self, args: List[str]) -> List[str]:
        """Parse the docker arguments and return them with module arguments injected."""
        logger.debug("sys.argv = %r", sys.argv)

        self._parse(args)
        flags = self.parser.flags
        run_flags = self.parser.run_flags

        # --debug on the docker command line switches the wrapper to debug output too
        if is_debug_enabled(flags) and not logger.isEnabledFor(logging.DEBUG):
            setup_logger(debug=True)

        self._print_wrapper_info()

        image_name = run_flags.image_name if run_flags is not None else ""
        logger.debug("DOCKER IMAGE == %r", image_name)
        logger.debug("DOCKER TAG == %r", run_flags.image_tag if run_flags is not None else None)

        if not image_name or not is_docker_run_command(args):
            return list(args)

        inject_args = self.pipeline.run(flags, run_flags)
        return inject_run_args(args, inject_args)

    def intercept_command(self, args: List[str]) -> NoReturn:
        """Intercept a docker command line and exec the real docker with it."""
        try:
            docker_args = self.build_docker_args(args)
        except Exception as e:
            logger.warning("Error in command processing: %s, proceeding with original command", str(e))
            docker_args = list(args)

        docker_exec(docker_args)

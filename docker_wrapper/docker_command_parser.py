from typing import Dict, List, Optional, Tuple
from docker_wrapper.errors import DockerArgumentError
from docker_wrapper.run_command import apply_run_metadata
from docker_wrapper.utils.logging import logger
from docker_wrapper.utils.constants import (
    BOOL, DOCKER_GLOBAL_OPTIONS, DOCKER_RUN_OPTIONS, DOUBLE_DASH, FALSE_VALUES, LIST, RUN_COMMAND
)

def is_docker_run_command(args: List[str]) -> bool:
    """Check the arguments for the single word "run".

    Any position counts, so a flag value that happens to be "run" (e.g.
    `--name run`) is also reported as a run command.
    """
    for arg in args:
        if arg == RUN_COMMAND:
            return True
    return False

def _is_option(arg: str) -> bool:
    return arg.startswith("-") and arg != "-"

class DockerFlags:
    """Flags given to docker itself, before the command."""

    def __init__(self):
        self.options = {}

    @property
    def debug(self) -> bool:
        return bool(self.options.get("--debug", False))

    @property
    def help(self) -> bool:
        return bool(self.options.get("--help", False))

    @property
    def version(self) -> bool:
        return bool(self.options.get("--version", False))

    @property
    def hosts(self) -> List[str]:
        return self.options.get("--host", [])

    def __repr__(self):
        return f"DockerFlags({self.options!r})"

class RunCommandFlags:
    """Options and positional arguments of `docker run`, plus derived image metadata."""

    def __init__(self):
        self.options = {}
        self.image = ""
        self.cmd_args = []
        self.image_name = ""
        self.image_tag = None
        self.mesos_task_id = ""
        self.marathon_app_id = ""

    @property
    def env(self) -> List[str]:
        return self.get("--env", [])

    def get(self, name: str, default=None):
        return self.options.get(name, default)

    def __repr__(self):
        return f"RunCommandFlags(image={self.image!r}, options={self.options!r}, cmd_args={self.cmd_args!r})"

class DockerCommandParser:
    """
    Parser for docker command lines intercepted by the wrapper.

    This parser handles the following command format:
    - docker [global_options] command [command_options] IMAGE [COMMAND] [ARG...]

    Only the `run` command is parsed past its name; for any other command
    parsing stops at the command and the rest is left to docker. Unknown
    options are skipped and kept in `unknown` so they reach docker untouched.
    """

    def __init__(self):
        self.flags = DockerFlags()
        self.run_flags = None
        self.unknown = []
        self._global_short = self._short_options(DOCKER_GLOBAL_OPTIONS)
        self._run_short = self._short_options(DOCKER_RUN_OPTIONS)

    @staticmethod
    def _short_options(table: Dict[str, Tuple[Optional[str], str]]) -> Dict[str, str]:
        return {short: long for long, (short, _) in table.items() if short}

    def _store(self, options: Dict, name: str, kind: str, value) -> None:
        if kind == LIST:
            options.setdefault(name, []).append(value)
        else:
            options[name] = value

    def _consume_option(self, args: List[str], i: int, table: Dict, short_map: Dict[str, str],
                        options: Dict) -> int:
        """Consume the option at args[i] and return the index of the next token."""
        arg = args[i]

        if arg.startswith("--"):
            name, sep, inline = arg.partition("=")
            if name not in table:
                self.unknown.append(arg)
                return i + 1
            kind = table[name][1]
            if kind == BOOL:
                self._store(options, name, kind, not (sep and inline.lower() in FALSE_VALUES))
                return i + 1
            if sep:
                self._store(options, name, kind, inline)
                return i + 1
            if i + 1 >= len(args):
                raise DockerArgumentError(f"expected argument for flag `{name}'")
            self._store(options, name, kind, args[i + 1])
            return i + 2

        # short option cluster, e.g. -it, -p8080:80, -e FOO=1
        for pos in range(1, len(arg)):
            short = "-" + arg[pos]
            name = short_map.get(short)
            if name is None:
                self.unknown.append(arg)
                return i + 1
            kind = table[name][1]
            if kind == BOOL:
                self._store(options, name, kind, True)
                continue
            rest = arg[pos + 1:]
            if rest.startswith("="):
                # -e= sets an empty value
                self._store(options, name, kind, rest[1:])
                return i + 1
            if rest:
                self._store(options, name, kind, rest)
                return i + 1
            if i + 1 >= len(args):
                raise DockerArgumentError(f"expected argument for flag `{short}'")
            self._store(options, name, kind, args[i + 1])
            return i + 2
        return i + 1

    def _parse_run_command(self, args: List[str]) -> None:
        run_flags = RunCommandFlags()
        self.run_flags = run_flags

        i = 0
        while i < len(args):
            arg = args[i]
            if arg == DOUBLE_DASH:
                i += 1
                break
            if not _is_option(arg):
                break
            i = self._consume_option(args, i, DOCKER_RUN_OPTIONS, self._run_short, run_flags.options)

        positional = args[i:]
        if not positional:
            raise DockerArgumentError("the required argument `Image` was not provided")

        # first non-option arg is the image, everything after belongs to the container command
        run_flags.image = positional[0]
        run_flags.cmd_args = list(positional[1:])
        apply_run_metadata(run_flags)

    def parse_command_line_args(self, args: List[str]) -> List[str]:
        """Parse docker arguments into self.flags and self.run_flags.

        Returns:
            List[str]: Arguments the parser did not consume (unknown options
            and everything after a command other than run).

        Raises:
            DockerArgumentError: if an option lacks its value or `run` has no
            image. Flags parsed up to that point stay available.
        """
        remaining = self.unknown
        i = 0
        while i < len(args):
            arg = args[i]
            if arg == DOUBLE_DASH:
                remaining.extend(args[i + 1:])
                break
            if _is_option(arg):
                i = self._consume_option(args, i, DOCKER_GLOBAL_OPTIONS, self._global_short, self.flags.options)
                continue
            if arg == RUN_COMMAND:
                self._parse_run_command(args[i + 1:])
            else:
                remaining.extend(args[i:])
            break

        logger.debug("Docker FLAGS = %r", self.flags)
        logger.debug("Run FLAGS = %r", self.run_flags)
        logger.debug("remaining ARGS = %r", remaining)
        return remaining

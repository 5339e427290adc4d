"""Helpers for finding and running the real docker binary."""

import json
import os
import shutil
import subprocess
from typing import Any, List, NoReturn, Optional, Tuple
from docker_wrapper.errors import DockerBinaryNotFoundError, DockerExecError
from docker_wrapper.utils.config import get_setting
from docker_wrapper.utils.constants import DOCKER_BINARY_NAME, ENV_SEARCH_PATH, SAFE_DOCKER_SEARCH_PATH
from docker_wrapper.utils.logging import logger, flush_logger

def get_search_path() -> str:
    return get_setting(ENV_SEARCH_PATH) or SAFE_DOCKER_SEARCH_PATH

def find_binary(name: str, search_path: Optional[str] = None) -> str:
    """Find an executable on the restricted search path.

    The inherited PATH is never consulted; it usually has the wrapper itself
    in front of the real binary.

    Raises:
        DockerBinaryNotFoundError: if the binary is not on the search path.
    """
    search_path = search_path or get_search_path()
    binary = shutil.which(name, path=search_path)
    if binary is None:
        raise DockerBinaryNotFoundError(f"{name}: executable file not found in {search_path}")
    return binary

def parse_json_from_string(json_string: str) -> Any:
    return json.loads(json_string)

def sh(name: str, *argv: str) -> Tuple[str, int]:
    """Run a binary from the search path and return its trimmed stdout and exit code."""
    binary = find_binary(name)
    cmd = [binary] + list(argv)
    logger.debug("sh CMD: %r", cmd)
    result = subprocess.run(cmd, check=False, capture_output=True, text=True)
    return result.stdout.strip(" \n"), result.returncode

def docker_inspect(name: str) -> Tuple[str, int]:
    """Inspect an image or a container with the real docker binary."""
    return sh(DOCKER_BINARY_NAME, "inspect", name)

def docker_exec(argv: List[str]) -> NoReturn:
    """Replace the current process with the real docker binary.

    Does not return on success.

    Raises:
        DockerBinaryNotFoundError: if docker is not on the search path.
        DockerExecError: if the exec call itself fails.
    """
    # grab the (pre-update) environment for the exec
    env = dict(os.environ)

    docker_binary = find_binary(DOCKER_BINARY_NAME)

    # argv[0] for the real binary is its conventional name
    new_args = [DOCKER_BINARY_NAME] + list(argv)

    logger.debug("docker binary: %s", docker_binary)
    logger.debug("docker args: %r", new_args)
    flush_logger()

    try:
        os.execve(docker_binary, new_args, env)
    except OSError as e:
        raise DockerExecError(f"exec {docker_binary} failed: {e}") from e
    raise DockerExecError(f"exec {docker_binary} returned")

"""Image reference and -e environment helpers for the docker run command."""

from typing import List, Optional, Tuple
from docker_wrapper.errors import ImageReferenceError
from docker_wrapper.utils.constants import MARATHON_APP_ENV, MESOS_TASK_ENV
from docker_wrapper.utils.logging import logger

def split_full_image_name_with_tag(full: str) -> Tuple[str, Optional[str]]:
    """Separate a docker `name[:tag]` reference.

    The last ':'-separated piece is the tag and all the rest is the image name,
    so a registry host:port prefix ends up on the name side.

    Raises:
        ImageReferenceError: if the reference yields no parts at all.
    """
    image_parts = full.split(":")
    if len(image_parts) >= 2:
        return ":".join(image_parts[:-1]), image_parts[-1]
    if len(image_parts) == 1:
        return image_parts[0], None
    raise ImageReferenceError("docker-wrapper: Unable to split image name into parts")

def collect_env_values_like(env: List[str], like: str) -> List[str]:
    """Return the values of every KEY=VALUE token starting with `like`.

    This is a prefix test on the whole token: "PORT" also matches PORTS=...
    and PORT0=.... Tokens without '=' carry no value and are skipped.
    """
    results = []
    for env_item in env:
        if env_item.startswith(like):
            _, sep, value = env_item.partition("=")
            if sep:
                results.append(value)
    return results

def single_env_value_like(env: List[str], like: str) -> str:
    """Return the first value matching `like`, or an empty string."""
    possibles = collect_env_values_like(env, like)
    if possibles:
        return possibles[0]
    return ""

def apply_run_metadata(run_flags) -> None:
    """Fill in image name/tag and the Mesos/Marathon ids on parsed run flags."""
    logger.debug("RunCommand Env=%r", run_flags.env)

    try:
        run_flags.image_name, run_flags.image_tag = split_full_image_name_with_tag(run_flags.image)
    except ImageReferenceError as e:
        logger.warning("RunCommand split error: %s", e)
        run_flags.image_name, run_flags.image_tag = "", None

    logger.debug("RunCommand fullImageName=%r", run_flags.image)
    logger.debug("RunCommand image=%r, tag=%r", run_flags.image_name, run_flags.image_tag)

    # assumes docker is called from Mesos (and Marathon)
    run_flags.mesos_task_id = single_env_value_like(run_flags.env, MESOS_TASK_ENV)
    run_flags.marathon_app_id = single_env_value_like(run_flags.env, MARATHON_APP_ENV)

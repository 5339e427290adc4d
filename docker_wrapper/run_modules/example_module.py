"""Example run module.

Looks at some -e environment variables and adds a new env var built from them.
"""

from typing import List
from docker_wrapper.run_command import single_env_value_like
from docker_wrapper.run_modules.registry import DefaultRunModule
from docker_wrapper.utils.logging import logger

class ExampleRunModule(DefaultRunModule):

    def __init__(self, priority: int = 0):
        super().__init__("example", priority)

    def handle_run(self, flags, run_flags) -> List[str]:
        logger.info("ExampleRunModule.handle_run(...)")

        # the parser already picked up MESOS_TASK_ID and pals
        ports = single_env_value_like(run_flags.env, "PORTS")

        return ["-e", f"SAMPLE_RUN_MODULE={run_flags.mesos_task_id}-{ports}"]

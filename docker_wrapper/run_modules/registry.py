from typing import List
from docker_wrapper.utils.logging import logger

class DefaultRunModule:
    """Minimal run module.

    A run module is any object with two methods:
      - priority() -> int: order of execution, ascending
      - handle_run(flags, run_flags) -> List[str]: extra `docker run`
        arguments to inject; an empty list means nothing to add

    Subclassing this class is optional.
    """

    def __init__(self, name: str = "", priority: int = 0):
        self.name = name or type(self).__name__
        self._priority = priority

    def priority(self) -> int:
        return self._priority

    def handle_run(self, flags, run_flags) -> List[str]:
        return []

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, priority={self._priority})"

class RunModuleRegistry:
    """The known run modules, in registration order."""

    def __init__(self):
        self._modules = []

    def register(self, module) -> None:
        if module is None:
            return
        self._modules.append(module)
        logger.debug("Registered run module %r", module)

    def sorted_modules(self) -> List:
        """Modules in execution order; sorted() is stable, so equal priorities keep registration order."""
        return sorted(self._modules, key=lambda module: module.priority())

    def __len__(self):
        return len(self._modules)

    def __iter__(self):
        return iter(self._modules)

class RunModulePipeline:
    """Runs every registered module and collects the arguments to inject."""

    def __init__(self, registry: RunModuleRegistry):
        self.registry = registry

    def run(self, flags, run_flags) -> List[str]:
        """Run modules in priority order.

        Returns:
            List[str]: All module contributions concatenated in execution order.
        """
        inject_args = []
        for module in self.registry.sorted_modules():
            try:
                module_args = module.handle_run(flags, run_flags)
            except Exception as e:
                # a broken module must not keep docker from running
                logger.warning("Run module %r failed: %s, skipping", module, str(e))
                continue
            if module_args:
                logger.debug("Run module %r contributed %r", module, module_args)
                inject_args.extend(module_args)
        return inject_args

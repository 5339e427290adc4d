from typing import List, Optional
from docker_wrapper.run_modules.example_module import ExampleRunModule
from docker_wrapper.run_modules.registry import RunModuleRegistry
from docker_wrapper.utils.config import get_setting
from docker_wrapper.utils.constants import ENV_MODULES
from docker_wrapper.utils.logging import logger

# name -> factory, in registration order
BUILTIN_RUN_MODULES = {
    "example": ExampleRunModule,
}

def enabled_module_names() -> List[str]:
    """Names from DOCKER_WRAPPER_MODULES; all built-ins when unset, none when empty."""
    setting = get_setting(ENV_MODULES)
    if setting is None:
        return list(BUILTIN_RUN_MODULES)
    return [name.strip() for name in setting.split(",") if name.strip()]

def build_registry(names: Optional[List[str]] = None) -> RunModuleRegistry:
    """Create the registry for this invocation and register the enabled modules."""
    if names is None:
        names = enabled_module_names()
    registry = RunModuleRegistry()
    for name in names:
        factory = BUILTIN_RUN_MODULES.get(name)
        if factory is None:
            logger.warning("Unknown run module %s, skipping", name)
            continue
        registry.register(factory())
    return registry

import os
from typing import Dict, Optional
from docker_wrapper.utils.constants import CONFIG_PATH, ENV_CONFIG_PATH, ENV_DEBUG

def get_config_path() -> str:
    """Return the config file path, honouring the DOCKER_WRAPPER_CONFIG override."""
    return os.environ.get(ENV_CONFIG_PATH) or CONFIG_PATH

def read_config(config_path: Optional[str] = None) -> Dict[str, str]:
    """Read KEY=VALUE settings from the config file.

    Blank lines, lines starting with '#' and lines without '=' are ignored.
    A missing or unreadable file yields an empty dict.
    """
    config_path = config_path or get_config_path()
    config = {}
    if not os.path.exists(config_path):
        return config
    try:
        with open(config_path, 'r') as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith('#') or '=' not in line:
                    continue
                key, value = line.split('=', 1)
                config[key.strip()] = value.strip()
    except (OSError, UnicodeDecodeError):
        return {}
    return config

def write_config(config: Dict[str, str], config_path: Optional[str] = None) -> None:
    """Write settings back to the config file, sorted by key."""
    config_path = config_path or get_config_path()
    config_dir = os.path.dirname(config_path)
    if config_dir:
        os.makedirs(config_dir, mode=0o755, exist_ok=True)
    with open(config_path, 'w') as f:
        for key, value in sorted(config.items()):
            f.write(f"{key}={value}\n")

def get_setting(key: str, default: Optional[str] = None,
                config_path: Optional[str] = None) -> Optional[str]:
    """Look up a setting: process environment first, then the config file."""
    if key in os.environ:
        return os.environ[key]
    return read_config(config_path).get(key, default)

def is_debug_enabled(flags=None) -> bool:
    """Check for --debug on the docker command line or DOCKER_WRAPPER_DEBUG=1."""
    if flags is not None and flags.debug:
        return True
    return get_setting(ENV_DEBUG) == "1"

"""Constants used across the docker-wrapper codebase."""

import os

VERSION = "0.4.0"
PROGRAM_NAME = "docker-wrapper"
LOGGER_NAME = "docker-wrapper"

# Real binary lookup. docker-wrapper is expected to be installed *outside* of
# this path (e.g. /opt/docker-wrapper/bin) so it never resolves to itself.
DOCKER_BINARY_NAME = "docker"
SAFE_DOCKER_SEARCH_PATH = "/usr/local/bin:/usr/bin:/bin:/usr/sbin:/sbin"

# Configuration paths
CONFIG_DIR = "/etc/docker-wrapper"
CONFIG_PATH = os.path.join(CONFIG_DIR, "docker-wrapper.env")

# Environment variables (also valid as keys in the config file)
ENV_CONFIG_PATH = "DOCKER_WRAPPER_CONFIG"
ENV_DEBUG = "DOCKER_WRAPPER_DEBUG"
ENV_LOG_FILE = "DOCKER_WRAPPER_LOG"
ENV_LOG_LEVEL = "DOCKER_WRAPPER_LOG_LEVEL"
ENV_SEARCH_PATH = "DOCKER_WRAPPER_SEARCH_PATH"
ENV_MODULES = "DOCKER_WRAPPER_MODULES"

# Logging
LOG_FILE = "/var/log/docker-wrapper.log"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s - (%(filename)s)'
LOG_DATE_FORMAT = '%Y/%m/%d %H:%M:%S'

# Docker command related
RUN_COMMAND = "run"
DOUBLE_DASH = "--"

# -e ENV vars looked up for every run command
MESOS_TASK_ENV = "MESOS_TASK_ID"
MARATHON_APP_ENV = "MARATHON_APP_ID"

# Option kinds
BOOL = "bool"
VALUE = "value"
LIST = "list"

FALSE_VALUES = {"false", "0", "no", "off"}

# Flags to docker itself: long name -> (short name, kind)
DOCKER_GLOBAL_OPTIONS = {
    "--config": (None, VALUE),
    "--context": ("-c", VALUE),
    "--debug": ("-D", BOOL),
    "--disable-legacy-registry": (None, BOOL),
    "--help": ("-h", BOOL),
    "--host": ("-H", LIST),
    "--log-level": ("-l", VALUE),
    "--tls": (None, BOOL),
    "--tlscacert": (None, VALUE),
    "--tlscert": (None, VALUE),
    "--tlskey": (None, VALUE),
    "--tlsverify": (None, BOOL),
    "--version": ("-v", BOOL),
}

# The docker run options. All of them have to be known so the first
# non-option argument (the image) is found reliably. Numeric options are kept
# as strings since only the image name matters here.
DOCKER_RUN_OPTIONS = {
    "--add-host": (None, LIST),
    "--annotation": (None, LIST),
    "--attach": ("-a", LIST),
    "--blkio-weight": (None, VALUE),
    "--blkio-weight-device": (None, LIST),
    "--cap-add": (None, LIST),
    "--cap-drop": (None, LIST),
    "--cgroup-parent": (None, VALUE),
    "--cgroupns": (None, VALUE),
    "--cidfile": (None, VALUE),
    "--cpu-period": (None, VALUE),
    "--cpu-quota": (None, VALUE),
    "--cpu-rt-period": (None, VALUE),
    "--cpu-rt-runtime": (None, VALUE),
    "--cpu-shares": ("-c", VALUE),
    "--cpus": (None, VALUE),
    "--cpuset-cpus": (None, VALUE),
    "--cpuset-mems": (None, VALUE),
    "--detach": ("-d", BOOL),
    "--detach-keys": (None, VALUE),
    "--device": (None, LIST),
    "--device-cgroup-rule": (None, LIST),
    "--device-read-bps": (None, LIST),
    "--device-read-iops": (None, LIST),
    "--device-write-bps": (None, LIST),
    "--device-write-iops": (None, LIST),
    "--disable-content-trust": (None, BOOL),
    "--dns": (None, LIST),
    "--dns-opt": (None, LIST),
    "--dns-option": (None, LIST),
    "--dns-search": (None, LIST),
    "--domainname": (None, VALUE),
    "--entrypoint": (None, VALUE),
    "--env": ("-e", LIST),
    "--env-file": (None, LIST),
    "--expose": (None, LIST),
    "--gpus": (None, VALUE),
    "--group-add": (None, LIST),
    "--health-cmd": (None, VALUE),
    "--health-interval": (None, VALUE),
    "--health-retries": (None, VALUE),
    "--health-start-period": (None, VALUE),
    "--health-timeout": (None, VALUE),
    "--help": (None, BOOL),
    "--hostname": ("-h", VALUE),
    "--init": (None, BOOL),
    "--interactive": ("-i", BOOL),
    "--ip": (None, VALUE),
    "--ip6": (None, VALUE),
    "--ipc": (None, VALUE),
    "--isolation": (None, VALUE),
    "--kernel-memory": (None, VALUE),
    "--label": ("-l", LIST),
    "--label-file": (None, LIST),
    "--link": (None, LIST),
    "--link-local-ip": (None, LIST),
    "--log-driver": (None, VALUE),
    "--log-opt": (None, LIST),
    "--lxc-conf": (None, LIST),
    "--mac-address": (None, VALUE),
    "--memory": ("-m", VALUE),
    "--memory-reservation": (None, VALUE),
    "--memory-swap": (None, VALUE),
    "--memory-swappiness": (None, VALUE),
    "--mount": (None, LIST),
    "--name": (None, VALUE),
    "--net": (None, VALUE),
    "--net-alias": (None, LIST),
    "--network": (None, VALUE),
    "--network-alias": (None, LIST),
    "--no-healthcheck": (None, BOOL),
    "--oom-kill-disable": (None, BOOL),
    "--oom-score-adj": (None, VALUE),
    "--pid": (None, VALUE),
    "--pids-limit": (None, VALUE),
    "--platform": (None, VALUE),
    "--privileged": (None, BOOL),
    "--publish": ("-p", LIST),
    "--publish-all": ("-P", BOOL),
    "--publish-service": (None, VALUE),
    "--pull": (None, VALUE),
    "--quiet": ("-q", BOOL),
    "--read-only": (None, BOOL),
    "--restart": (None, VALUE),
    "--rm": (None, BOOL),
    "--runtime": (None, VALUE),
    "--security-opt": (None, LIST),
    "--shm-size": (None, VALUE),
    "--sig-proxy": (None, BOOL),
    "--stop-signal": (None, VALUE),
    "--stop-timeout": (None, VALUE),
    "--storage-opt": (None, LIST),
    "--sysctl": (None, LIST),
    "--tmpfs": (None, LIST),
    "--tty": ("-t", BOOL),
    "--ulimit": (None, LIST),
    "--user": ("-u", VALUE),
    "--userns": (None, VALUE),
    "--uts": (None, VALUE),
    "--volume": ("-v", LIST),
    "--volume-driver": (None, VALUE),
    "--volumes-from": (None, LIST),
    "--workdir": ("-w", VALUE),
}

HELP_TEXT = """Usage: docker-wrapper [OPTIONS] COMMAND [arg...]

A Thin wrapper around docker
"""

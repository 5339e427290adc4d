import os
import sys
import pytest

# Add repo root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

from docker_wrapper.docker_command_parser import DockerCommandParser, is_docker_run_command
from docker_wrapper.errors import DockerArgumentError
from docker_wrapper.run_command import collect_env_values_like

# sample Mesos/Marathon command line
EXAMPLE_RUN1_ARGS = [
    "run",
    "-d", "-c", "256", "-m", "33554432",
    "-e", "MARATHON_APP_VERSION=2015-06-16T19:01:46.290Z",
    "-e", "HOST=mesosdev5.np.wc1.yellowpages.com",
    "-e", "PORT_10000=31782",
    "-e", "MESOS_TASK_ID=container-echo-test.237350f2-145a-11e5-a886-56847afe9799",
    "-e", "PORT=31782",
    "-e", "PORTS=31782",
    "-e", "MARATHON_APP_ID=/container-echo-test",
    "-e", "PORT0=31782",
    "-e", "MESOS_SANDBOX=/mnt/mesos/sandbox",
    "-v", "/tmp/mesos/slaves/S0/frameworks/0000/executors/container-echo-test/runs/ffeaf330:/mnt/mesos/sandbox",
    "--net", "bridge",
    "--entrypoint", "/bin/sh",
    "--name", "mesos-ffeaf330-c579-4780-98f7-53877eecea99",
    "centos:centos6.6",
    "-c", "while : ; do uptime; sleep 10 ; done",
]

# image name without a tag, and the last arg is part of CMD and has a colon
EXAMPLE_RUN2_ARGS = [
    "run",
    "-d", "--restart", "always", "--link", "nsqlookupd1:nsqlookupd",
    "-v", "/var/run/docker.sock:/var/run/docker.sock",
    "-v", "/usr/local/bin/docker:/usr/local/bin/docker",
    "-v", "/tmp:/tmp",
    "-e", "DOCKER_HOST=\"unix:///var/run/docker.sock\"",
    "--privileged",
    "-v", "/path/to/script.sh:/path/to/script.sh",
    "--name", "nsqexec",
    "jess/nsqexec", "--", "-d", "-exec=/path/to/script.sh",
    "-topic", "hooks-docker", "-channel", "hook",
    "-lookupd-addr", "nsqlookupd:4161",
]

# same without the extra -- (double dash) crutch
EXAMPLE_RUN2B_ARGS = [
    "run",
    "--name", "nsqexec",
    "jess/nsqexec", "-exec=/path/to/script.sh",
    "-topic", "hooks-docker", "-channel", "hook",
    "-lookupd-addr", "nsqlookupd:4161",
]

@pytest.fixture
def parser():
    """Create a DockerCommandParser instance for testing."""
    return DockerCommandParser()

def test_is_docker_run_command():
    assert is_docker_run_command(["docker", "run", "theimage/name"]) is True
    assert is_docker_run_command(["docker", "pull", "theimage/name"]) is False
    assert is_docker_run_command(["docker", "runthis", "theimage/name"]) is False
    assert is_docker_run_command([]) is False

def test_is_docker_run_command_flag_value():
    """A flag value equal to "run" is reported as a run command."""
    assert is_docker_run_command(["ps", "--format", "run"]) is True

def test_parse_mesos_example(parser):
    parser.parse_command_line_args(EXAMPLE_RUN1_ARGS)
    run_flags = parser.run_flags

    assert run_flags.image == "centos:centos6.6"
    assert run_flags.image_name == "centos"
    assert run_flags.image_tag == "centos6.6"
    assert run_flags.mesos_task_id == "container-echo-test.237350f2-145a-11e5-a886-56847afe9799"
    assert run_flags.marathon_app_id == "/container-echo-test"
    assert run_flags.cmd_args == ["-c", "while : ; do uptime; sleep 10 ; done"]
    assert run_flags.get("--detach") is True
    assert run_flags.get("--cpu-shares") == "256"
    assert run_flags.get("--memory") == "33554432"
    assert run_flags.get("--net") == "bridge"
    assert len(run_flags.env) == 9

def test_parse_nsqexec_with_double_dash(parser):
    parser.parse_command_line_args(EXAMPLE_RUN2_ARGS)
    run_flags = parser.run_flags

    assert run_flags.image_name == "jess/nsqexec"
    assert run_flags.image_tag is None
    assert run_flags.cmd_args[0] == "--"
    assert run_flags.cmd_args[-1] == "nsqlookupd:4161"
    assert run_flags.get("--privileged") is True
    assert run_flags.get("--volume") == [
        "/var/run/docker.sock:/var/run/docker.sock",
        "/usr/local/bin/docker:/usr/local/bin/docker",
        "/tmp:/tmp",
        "/path/to/script.sh:/path/to/script.sh",
    ]

def test_parse_nsqexec_without_double_dash(parser):
    parser.parse_command_line_args(EXAMPLE_RUN2B_ARGS)
    assert parser.run_flags.image_name == "jess/nsqexec"
    assert parser.run_flags.cmd_args[0] == "-exec=/path/to/script.sh"

def test_parse_image_with_tag_and_env(parser):
    parser.parse_command_line_args(["run", "-e", "PORT=9000", "myimage:1.2", "cmd"])
    run_flags = parser.run_flags

    assert run_flags.image_name == "myimage"
    assert run_flags.image_tag == "1.2"
    assert run_flags.cmd_args == ["cmd"]
    assert collect_env_values_like(run_flags.env, "PORT") == ["9000"]

def test_parse_image_without_tag(parser):
    parser.parse_command_line_args(["run", "--name", "x", "repo/image", "--", "-flag", "val"])
    run_flags = parser.run_flags

    assert run_flags.image_name == "repo/image"
    assert run_flags.image_tag is None
    assert run_flags.get("--name") == "x"
    assert run_flags.cmd_args == ["--", "-flag", "val"]

def test_parse_registry_with_port(parser):
    parser.parse_command_line_args(["run", "localhost:5000/team/app:2.0"])
    assert parser.run_flags.image_name == "localhost:5000/team/app"
    assert parser.run_flags.image_tag == "2.0"

def test_parse_global_options(parser):
    args = ["-D", "-H", "tcp://10.0.0.1:2375", "--host=unix:///var/run/docker.sock",
            "--tlsverify", "run", "busybox"]
    parser.parse_command_line_args(args)

    assert parser.flags.debug is True
    assert parser.flags.hosts == ["tcp://10.0.0.1:2375", "unix:///var/run/docker.sock"]
    assert parser.flags.options["--tlsverify"] is True
    assert parser.run_flags.image_name == "busybox"

def test_parse_short_option_clusters(parser):
    args = ["run", "-it", "-p8080:80", "-eFOO=1", "-e=BAR=2", "--rm", "alpine", "sh"]
    parser.parse_command_line_args(args)
    run_flags = parser.run_flags

    assert run_flags.get("--interactive") is True
    assert run_flags.get("--tty") is True
    assert run_flags.get("--publish") == ["8080:80"]
    assert run_flags.env == ["FOO=1", "BAR=2"]
    assert run_flags.get("--rm") is True
    assert run_flags.image == "alpine"
    assert run_flags.cmd_args == ["sh"]

def test_parse_inline_long_values(parser):
    parser.parse_command_line_args(["run", "--name=web", "--env=A=1", "--rm=false", "nginx:latest"])
    run_flags = parser.run_flags

    assert run_flags.get("--name") == "web"
    assert run_flags.env == ["A=1"]
    assert run_flags.get("--rm") is False
    assert run_flags.image_tag == "latest"

def test_parse_run_short_h_is_hostname(parser):
    parser.parse_command_line_args(["run", "-h", "box1", "alpine"])
    assert parser.run_flags.get("--hostname") == "box1"
    assert parser.flags.help is False
    assert parser.run_flags.image == "alpine"

def test_parse_label_value_run(parser):
    parser.parse_command_line_args(["run", "-l", "run", "alpine"])
    assert parser.run_flags.get("--label") == ["run"]
    assert parser.run_flags.image == "alpine"

def test_parse_double_dash_before_image(parser):
    parser.parse_command_line_args(["run", "-d", "--", "alpine", "echo", "hi"])
    assert parser.run_flags.image == "alpine"
    assert parser.run_flags.cmd_args == ["echo", "hi"]

def test_parse_unknown_options_pass_through(parser):
    remaining = parser.parse_command_line_args(["run", "--brand-new-flag=1", "-Z", "alpine"])
    assert remaining == ["--brand-new-flag=1", "-Z"]
    assert parser.run_flags.image == "alpine"

def test_parse_other_command_stops(parser):
    remaining = parser.parse_command_line_args(["--debug", "pull", "busybox:latest"])
    assert parser.flags.debug is True
    assert parser.run_flags is None
    assert remaining == ["pull", "busybox:latest"]

def test_parse_global_double_dash(parser):
    remaining = parser.parse_command_line_args(["--", "run", "alpine"])
    assert parser.run_flags is None
    assert remaining == ["run", "alpine"]

def test_parse_help_and_version(parser):
    parser.parse_command_line_args(["-h"])
    assert parser.flags.help is True

    version_parser = DockerCommandParser()
    version_parser.parse_command_line_args(["--version"])
    assert version_parser.flags.version is True

def test_parse_run_without_image(parser):
    with pytest.raises(DockerArgumentError, match="Image"):
        parser.parse_command_line_args(["run", "-d"])
    # flags parsed so far are kept
    assert parser.run_flags.get("--detach") is True
    assert parser.run_flags.image_name == ""

def test_parse_missing_long_value(parser):
    with pytest.raises(DockerArgumentError, match="expected argument for flag `--name'"):
        parser.parse_command_line_args(["run", "--name"])

def test_parse_missing_short_value(parser):
    with pytest.raises(DockerArgumentError, match="expected argument"):
        parser.parse_command_line_args(["run", "-e"])

def test_parse_short_option_empty_inline_value(parser):
    parser.parse_command_line_args(["run", "-e=", "img"])
    assert parser.run_flags.env == [""]
    assert parser.run_flags.image == "img"

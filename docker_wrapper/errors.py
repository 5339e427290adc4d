"""Exceptions raised by docker-wrapper.

Only DockerBinaryNotFoundError and DockerExecError are fatal; everything else
is logged and the real docker command still runs.
"""


class DockerWrapperError(Exception):
    """Base class for docker-wrapper errors."""


class DockerArgumentError(DockerWrapperError, ValueError):
    """The docker command line could not be parsed far enough to find the image."""


class ImageReferenceError(DockerWrapperError, ValueError):
    """An image reference could not be split into name and tag."""


class DockerBinaryNotFoundError(DockerWrapperError):
    """The real binary is not on the restricted search path."""


class DockerExecError(DockerWrapperError):
    """Replacing the current process with the real binary failed."""

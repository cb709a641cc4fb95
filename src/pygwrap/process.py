"""Synchronous subprocess execution for pygmentize invocations.

An :class:`Invocation` describes one command line plus an optional stdin
payload.  :func:`execute` runs it and captures everything into an
:class:`ExecutionResult`; :func:`get_output` additionally turns a non-zero
exit into :class:`~pygwrap.errors.ExecutionFailure`.
"""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
from dataclasses import dataclass, replace
from typing import Any

from pygwrap.errors import ExecutableNotFoundError, ExecutionFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Invocation:
    """An executable, its ordered arguments and an optional stdin payload."""

    executable: str
    args: tuple[str, ...] = ()
    input: str | None = None

    @property
    def command(self) -> list[str]:
        return [self.executable, *self.args]

    def add(self, *args: str) -> Invocation:
        """Return a copy with *args* appended."""
        return replace(self, args=self.args + tuple(args))

    def with_input(self, data: str | None) -> Invocation:
        return replace(self, input=data)


@dataclass(frozen=True)
class ExecutionResult:
    """Exit status and captured streams of a finished process."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _check_executable(executable: str) -> str:
    """Return the resolved path to *executable*, or raise."""
    path = shutil.which(executable)
    if path is None:
        raise ExecutableNotFoundError(executable)
    return path


def execute(invocation: Invocation, *, timeout: float | None = None) -> ExecutionResult:
    """Run *invocation* to completion and capture its output.

    Blocks until the process exits.  Launch errors and timeouts raise
    ``ExecutionFailure``; a non-zero exit status does not (see
    :func:`get_output`).
    Output bytes that do not decode are replaced with U+FFFD.
    """
    binary = _check_executable(invocation.executable)
    cmd = [binary, *invocation.args]
    logger.debug("running: %s", shlex.join(invocation.command))

    kwargs: dict[str, Any] = {
        "capture_output": True,
        "text": True,
        "errors": "replace",
        "timeout": timeout,
    }
    if invocation.input is None:
        kwargs["stdin"] = subprocess.DEVNULL
    else:
        kwargs["input"] = invocation.input

    try:
        result = subprocess.run(cmd, **kwargs)
    except subprocess.TimeoutExpired as exc:
        raise ExecutionFailure(
            f"{invocation.executable} timed out after {exc.timeout} seconds",
            command=invocation.command,
        ) from exc
    except OSError as exc:
        raise ExecutionFailure(
            f"failed to launch {invocation.executable}: {exc}",
            command=invocation.command,
        ) from exc
    except UnicodeError as exc:
        raise ExecutionFailure(
            f"could not transcode data for {invocation.executable}: {exc}",
            command=invocation.command,
        ) from exc

    logger.debug("%s exited with %d", invocation.executable, result.returncode)
    return ExecutionResult(
        returncode=result.returncode,
        stdout=result.stdout,
        stderr=result.stderr,
    )


def get_output(invocation: Invocation, *, timeout: float | None = None) -> str:
    """Run *invocation* and return stdout, raising on non-zero exit.

    The raised ``ExecutionFailure`` carries the captured stderr unchanged
    as its message.
    """
    result = execute(invocation, timeout=timeout)
    if not result.ok:
        logger.debug(
            "%s failed (exit %d)", invocation.executable, result.returncode
        )
        raise ExecutionFailure(
            result.stderr,
            returncode=result.returncode,
            command=invocation.command,
        )
    return result.stdout

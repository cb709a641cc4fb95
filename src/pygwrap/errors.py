"""Shared exception classes for pygwrap."""

from __future__ import annotations


class ExecutionFailure(RuntimeError):
    """Raised when pygmentize exits non-zero or cannot be launched.

    ``str(exc)`` is the captured standard error of the process, or a
    launch-failure message when the process never ran.
    """

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        command: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.command = list(command) if command else []


class ExecutableNotFoundError(ExecutionFailure):
    """Raised when the pygmentize executable cannot be found."""

    def __init__(self, executable: str) -> None:
        super().__init__(
            f"{executable} was not found or is not executable.\n"
            "It ships with Pygments. Install it with:\n"
            "  pip:           pip install Pygments\n"
            "  Ubuntu/Debian: sudo apt-get install python3-pygments\n"
            "  macOS:         brew install pygments",
            command=[executable],
        )
        self.executable = executable

"""
Starter Kit — Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the scaffolding workflow.
How:   Each exception carries a human-readable message and an optional
       context dict. The CLI catches the base class, logs both, and exits 1.
Who:   Raised by services and schemas; caught in `starterkit.main`.
When:  The first failing step of a scaffold run raises; nothing after it runs.

Exception Hierarchy:
    StarterKitError (base)
    ├── ValidationError          → bad project name or option
    ├── FileStorageError         → directory or file could not be read or written
    └── EnvironmentSetupError    → venv creation / pip install / pip freeze failed

No exception triggers cleanup. A failed run leaves whatever it already wrote
on disk, the same as a shell script running under `set -e`.
"""

from typing import Any, Dict, Optional, Sequence


class StarterKitError(Exception):
    """
    Base exception for all Starter Kit errors.

    Attributes:
        message:  User-facing error description (printed by the CLI)
        context:  Additional debug info (logged at DEBUG level)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(StarterKitError):
    """
    Raised when user input fails validation.

    When:    Empty project name, a name containing a path separator,
             or a name of "." / "..".
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class FileStorageError(StarterKitError):
    """
    Raised when a filesystem operation fails.

    When:    Permission denied, disk full, a file sitting where a directory
             is expected, and similar OS-level failures.
    """

    def __init__(
        self,
        message: str = "File system operation failed",
        path: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message=message, context=ctx)
        self.path = path


class EnvironmentSetupError(StarterKitError):
    """
    Raised when a virtual-environment or package-installer command fails.

    Carries the command line, its exit code and whatever it wrote to stderr,
    so the CLI can show the underlying tool's own message.
    """

    def __init__(
        self,
        message: str = "Environment setup failed",
        command: Optional[Sequence[str]] = None,
        returncode: Optional[int] = None,
        stderr: str = "",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if command:
            ctx["command"] = " ".join(command)
        if returncode is not None:
            ctx["returncode"] = returncode
        if stderr:
            ctx["stderr"] = stderr
        super().__init__(message=message, context=ctx)
        self.command = list(command) if command else []
        self.returncode = returncode
        self.stderr = stderr

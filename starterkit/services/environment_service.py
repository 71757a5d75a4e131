"""
Starter Kit — Environment Service
==================================

What:  Creates the project's virtual environment and installs packages into it.
How:   Runs `python -m venv`, then the venv's own `python -m pip` for
       upgrade / install / freeze, each through asyncio subprocesses.
Who:   Called by ProjectService between the base files and the `api/` tree.

Command sequence (stock settings):
    <python> -m venv <project>/venv
    <venv-python> -m pip install --upgrade pip
    <venv-python> -m pip install fastapi uvicorn[standard]
    <venv-python> -m pip freeze            → requirements.txt

Calling pip through the venv interpreter replaces `source venv/bin/activate`;
no shell and no environment mutation is involved.

Error handling:
    A non-zero exit, a missing executable or a timeout raises
    EnvironmentSetupError. There is no retry and no cleanup of the venv.
"""

import asyncio
import logging
import os
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from starterkit.config import settings
from starterkit.exceptions import EnvironmentSetupError

logger = logging.getLogger(__name__)


def venv_python(venv_path: Path) -> Path:
    """Interpreter inside a venv: bin/python on POSIX, Scripts\\python.exe on Windows."""
    if os.name == "nt":
        return venv_path / "Scripts" / "python.exe"
    return venv_path / "bin" / "python"


class EnvironmentService:
    """
    Thin async wrapper over the venv and pip command lines.

    Args:
        python_executable: Interpreter that creates the venv (default: settings)
        timeout: Seconds allowed per command (default: settings.command_timeout)
    """

    def __init__(
        self,
        python_executable: Optional[str] = None,
        timeout: Optional[int] = None,
    ):
        self.python_executable = python_executable or settings.python_executable
        self.timeout = timeout or settings.command_timeout

    async def run(self, command: Sequence[str], cwd: Optional[Path] = None) -> Tuple[str, str]:
        """
        Run one command to completion and return (stdout, stderr).

        Raises:
            EnvironmentSetupError on a missing executable, timeout or non-zero exit.
        """
        cmd = [str(part) for part in command]
        logger.debug("Running: %s", " ".join(cmd))

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                cwd=str(cwd) if cwd else None,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise EnvironmentSetupError(
                message=f"Could not start '{cmd[0]}': {e}",
                command=cmd,
            ) from e

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            process.kill()
            await process.wait()
            raise EnvironmentSetupError(
                message=f"Command timed out after {self.timeout}s: {' '.join(cmd)}",
                command=cmd,
            ) from e

        out = stdout.decode("utf-8", errors="replace") if stdout else ""
        err = stderr.decode("utf-8", errors="replace") if stderr else ""

        if process.returncode != 0:
            logger.error("Command failed (exit %s): %s", process.returncode, " ".join(cmd))
            raise EnvironmentSetupError(
                message=f"Command failed with exit code {process.returncode}: {' '.join(cmd)}",
                command=cmd,
                returncode=process.returncode,
                stderr=err.strip(),
            )
        return out, err

    async def create_venv(self, project_root: Path, venv_dir: Optional[str] = None) -> Path:
        venv_path = Path(project_root) / (venv_dir or settings.venv_dir)
        logger.info("Creating virtual environment...")
        await self.run([self.python_executable, "-m", "venv", str(venv_path)], cwd=project_root)
        return venv_path

    async def upgrade_pip(self, venv_path: Path) -> None:
        await self.run([venv_python(venv_path), "-m", "pip", "install", "--upgrade", "pip"])

    async def install(self, venv_path: Path, packages: Sequence[str]) -> None:
        if not packages:
            logger.warning("No packages configured; skipping install")
            return
        await self.run([venv_python(venv_path), "-m", "pip", "install", *packages])

    async def freeze(self, venv_path: Path) -> List[str]:
        """Return `pip freeze` output as requirement lines, blank lines dropped."""
        out, _ = await self.run([venv_python(venv_path), "-m", "pip", "freeze"])
        return [line.strip() for line in out.splitlines() if line.strip()]

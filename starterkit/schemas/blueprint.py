"""
Starter Kit — Pydantic Schemas
===============================

What:  Pydantic models describing the layout to write and the outcome of a run.
How:   The blueprint module builds a `Blueprint` once; the project service
       walks it and returns a `ScaffoldResult`.
Who:   Used by services, the CLI and the tests.

Schemas:
    ProjectName      validated project directory name
    PlaceholderFile  one file of the layout and its static content
    Blueprint        ordered directories + files of the layout
    ScaffoldResult   what a scaffold run produced
"""

import os
import shlex
from pathlib import Path, PurePosixPath
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class ProjectName(BaseModel):
    """
    What:  A project name that is safe to use as a single directory name.
    How:   Strips surrounding whitespace, then rejects empty names, "." and "..",
           and anything containing a path separator or a NUL byte.
    """
    value: str = Field(description="Directory name of the new project")

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        name = v.strip()
        if not name:
            raise ValueError("Project name must not be empty")
        if name in {".", ".."}:
            raise ValueError(f"'{name}' is not a valid project name")
        if "/" in name or "\\" in name:
            raise ValueError(
                f"Project name '{name}' must not contain a path separator"
            )
        if "\x00" in name:
            raise ValueError("Project name must not contain a NUL byte")
        return name


class PlaceholderFile(BaseModel):
    """One file of the layout. `path` is POSIX-style and relative to the project root."""
    path: str = Field(description="Relative path, e.g. 'api/models/user.py'")
    content: str = Field(default="", description="Static text written to the file")
    base: bool = Field(
        default=False,
        description="Written before the environment step (project-root files)",
    )

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        p = PurePosixPath(v)
        if p.is_absolute() or ".." in p.parts:
            raise ValueError(f"Placeholder path '{v}' must stay inside the project")
        return str(p)

    @property
    def parent(self) -> Optional[str]:
        parent = str(PurePosixPath(self.path).parent)
        return None if parent == "." else parent


class Blueprint(BaseModel):
    """
    What:  The full layout of a scaffolded project.
    How:   `directories` lists every directory parents-first (including ones
           that hold no file); `files` keeps the order files are written in.
    """
    name: str = Field(description="Human-readable name of the layout")
    directories: List[str] = Field(default_factory=list)
    files: List[PlaceholderFile] = Field(default_factory=list)

    @property
    def base_files(self) -> List[PlaceholderFile]:
        return [f for f in self.files if f.base]

    @property
    def tree_files(self) -> List[PlaceholderFile]:
        return [f for f in self.files if not f.base]

    def file(self, path: str) -> PlaceholderFile:
        for placeholder in self.files:
            if placeholder.path == path:
                return placeholder
        raise KeyError(path)


class ScaffoldResult(BaseModel):
    """
    What:  Summary of a completed scaffold run.
    Who:   Returned by `ProjectService.create_project`; the CLI prints from it.
    """
    project_name: str
    project_root: Path
    directories: List[Path] = Field(default_factory=list)
    files: List[Path] = Field(default_factory=list)
    venv_path: Optional[Path] = Field(
        default=None,
        description="Virtual environment location (null when skipped)",
    )
    requirements: List[str] = Field(
        default_factory=list,
        description="Lines written to requirements.txt by pip freeze",
    )

    def run_command_from(self, cwd: Optional[Path] = None) -> str:
        """
        Shell line that starts the app, as seen from `cwd` (default: current directory).

        The `cd` target is the project root relative to `cwd`, or absolute when
        no relative path exists (another drive on Windows). It is shell-quoted.
        """
        base = Path(cwd) if cwd is not None else Path.cwd()
        try:
            target = os.path.relpath(self.project_root.resolve(), base.resolve())
        except ValueError:
            target = str(self.project_root.resolve())
        activate = ""
        if self.venv_path:
            activate = f"source {shlex.quote(self.venv_path.name)}/bin/activate && "
        return f"cd {shlex.quote(target)} && {activate}uvicorn api.main:app --reload"

    @property
    def run_command(self) -> str:
        return self.run_command_from()

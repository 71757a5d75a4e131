"""
Starter Kit — Project Service (Scaffold Orchestrator)
======================================================

What:  Runs the whole scaffold: name → directories → base files → venv →
       install → freeze → `api/` tree.
How:   Composes FileService and EnvironmentService; every step is awaited in
       sequence and the first failure propagates untouched.
Who:   Called by the `starterkit new` command.

Orchestration Flow:
    ┌──────────┐   ┌────────────┐   ┌──────────────┐   ┌────────────┐
    │  Name    │──▶│ Base files │──▶│ venv + pip   │──▶│ api/ tree  │
    │ (valid.) │   │ .env, ...  │   │ freeze→reqs  │   │ placeholders│
    └──────────┘   └────────────┘   └──────────────┘   └────────────┘

    On failure at any step:
    - The StarterKitError propagates to the CLI (exit 1)
    - Files and directories already written stay on disk
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError

from starterkit.blueprint import build_blueprint
from starterkit.config import settings
from starterkit.exceptions import ValidationError
from starterkit.schemas.blueprint import Blueprint, ProjectName, ScaffoldResult
from starterkit.services.environment_service import EnvironmentService
from starterkit.services.file_service import FileService

logger = logging.getLogger(__name__)


def validate_project_name(name: Optional[str]) -> str:
    """
    Normalize and validate a project name.

    Raises:
        ValidationError with the first validator message.
    """
    try:
        return ProjectName(value=name or "").value
    except PydanticValidationError as e:
        message = e.errors()[0]["msg"].removeprefix("Value error, ")
        raise ValidationError(
            message=message,
            field="project_name",
            context={"value": name},
        ) from e


class ProjectService:
    """
    Business logic for creating a project on disk.

    Args:
        environment: EnvironmentService override (tests inject a mock)
        blueprint: Layout override (default: the FastAPI blueprint)
    """

    def __init__(
        self,
        environment: Optional[EnvironmentService] = None,
        blueprint: Optional[Blueprint] = None,
    ):
        self.environment = environment or EnvironmentService()
        self.blueprint = blueprint or build_blueprint()

    async def create_project(
        self,
        name: str,
        parent_dir: Optional[Path] = None,
        create_venv: Optional[bool] = None,
        packages: Optional[Sequence[str]] = None,
    ) -> ScaffoldResult:
        """
        Create a project named `name` inside `parent_dir` (default: cwd).

        Workflow Steps:
            1. Validate the name
            2. Create the project root (an existing directory is reused)
            3. Write .env, requirements.txt, README.md
            4. Create venv, upgrade pip, install packages, freeze into
               requirements.txt (skipped when create_venv is false)
            5. Create the `api/` directories and placeholder files

        Raises:
            ValidationError: invalid project name
            FileStorageError: a directory or file could not be written
            EnvironmentSetupError: venv or pip command failed
        """
        project_name = validate_project_name(name)
        parent = Path(parent_dir) if parent_dir is not None else Path.cwd()
        root = parent / project_name
        do_venv = settings.create_venv if create_venv is None else create_venv
        to_install = list(packages) if packages is not None else settings.packages_list

        files = FileService(root)
        files.ensure_directory(root)
        logger.info("Setting up project structure...")

        # ── Step 3: Base files ────────────────────────────────────────────
        written: List[Path] = await files.write_placeholders(self.blueprint.base_files)

        # ── Step 4: Virtual environment ───────────────────────────────────
        venv_path: Optional[Path] = None
        requirements: List[str] = []
        if do_venv:
            venv_path = await self.environment.create_venv(root)
            logger.info("Installing %s...", " and ".join(to_install) or "nothing")
            if settings.upgrade_pip:
                await self.environment.upgrade_pip(venv_path)
            await self.environment.install(venv_path, to_install)
            requirements = await self.environment.freeze(venv_path)
            body = "".join(f"{line}\n" for line in requirements)
            await files.write_file(files.resolve("requirements.txt"), body)
        else:
            logger.info("Skipping virtual environment and package install")

        # ── Step 5: api/ tree ─────────────────────────────────────────────
        directories = files.create_directories(self.blueprint.directories)
        written += await files.write_placeholders(self.blueprint.tree_files)

        logger.info("Wrote %d files under %s", len(written), root)
        return ScaffoldResult(
            project_name=project_name,
            project_root=root,
            directories=directories,
            files=written,
            venv_path=venv_path,
            requirements=requirements,
        )

    def plan(self, name: str, parent_dir: Optional[Path] = None) -> List[Path]:
        """Paths a run would create, without touching the filesystem."""
        root = (Path(parent_dir) if parent_dir is not None else Path.cwd()) / validate_project_name(name)
        files = FileService(root)
        planned = [root]
        planned += [files.resolve(d) for d in self.blueprint.directories]
        planned += [files.resolve(f.path) for f in self.blueprint.files]
        return planned

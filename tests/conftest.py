"""
Starter Kit — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the whole suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── workspace: empty parent directory for scaffolded projects
    ├── frozen_requirements: canned `pip freeze` output
    ├── mock_environment: EnvironmentService double (no venv, no pip)
    ├── project_service: ProjectService wired to mock_environment
    └── load_module: imports a generated .py file by path
"""

import importlib.util
import os
import uuid
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Set before any starterkit import so the settings singleton picks them up
os.environ["STARTERKIT_LOG_LEVEL"] = "WARNING"
os.environ["STARTERKIT_COMMAND_TIMEOUT"] = "60"


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def workspace(tmp_path):
    directory = tmp_path / "workspace"
    directory.mkdir()
    return directory


@pytest.fixture
def frozen_requirements():
    return [
        "annotated-types==0.7.0",
        "fastapi==0.115.0",
        "pydantic==2.9.2",
        "starlette==0.38.6",
        "uvicorn==0.31.0",
    ]


@pytest.fixture
def mock_environment(frozen_requirements):
    """
    A stand-in for EnvironmentService.

    create_venv makes the venv directory so the tree looks real;
    the pip steps are no-ops and freeze returns `frozen_requirements`.
    """
    def make_venv(project_root, venv_dir=None):
        venv_path = Path(project_root) / (venv_dir or "venv")
        venv_path.mkdir(parents=True, exist_ok=True)
        return venv_path

    env = MagicMock()
    env.create_venv = AsyncMock(side_effect=make_venv)
    env.upgrade_pip = AsyncMock()
    env.install = AsyncMock()
    env.freeze = AsyncMock(return_value=list(frozen_requirements))
    return env


@pytest.fixture
def project_service(mock_environment):
    from starterkit.services.project_service import ProjectService
    return ProjectService(environment=mock_environment)


@pytest.fixture
def load_module():
    """
    Import a Python file by path under a unique module name.

    Usage:
        module = load_module(project_root / "api" / "main.py")
    """
    def _load(path: Path):
        name = f"generated_{uuid.uuid4().hex}"
        spec = importlib.util.spec_from_file_location(name, path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    return _load

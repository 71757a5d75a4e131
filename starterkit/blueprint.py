"""
Starter Kit — FastAPI Project Blueprint
========================================

What:  The fixed directory layout and placeholder files of a new project.
How:   Plain data (`BASE_FILES`, `API_FILES`, `EXTRA_DIRECTORIES`) assembled
       into a `Blueprint` by `build_blueprint()`. The style guide documents
       the same layout; `tests/test_blueprint.py` keeps the two in sync.

Layout:
    <project>/
    ├── .env
    ├── requirements.txt
    ├── README.md
    └── api/
        ├── main.py
        ├── middleware.py
        ├── .config/   (settings, security, db/connection)
        ├── routers/v1/ (dependencies, auth, user)
        ├── models/    (Pydantic request/response models)
        ├── schemas/   (ORM table mappings)
        ├── services/  (business logic)
        ├── utils/
        └── tests/     (conftest, unit/, integration/)
"""

from functools import lru_cache
from pathlib import PurePosixPath
from typing import Dict, List, Tuple

from starterkit.schemas.blueprint import Blueprint, PlaceholderFile

MAIN_PY = '''from fastapi import FastAPI

app = FastAPI()

@app.get("/")
def root():
    return {"message": "Welcome to your FastAPI app!"}
'''

# Written before the virtual environment is created.
# requirements.txt is later replaced by the output of `pip freeze`.
BASE_FILES: List[Tuple[str, str]] = [
    (".env", ""),
    ("requirements.txt", "# Python dependencies\n"),
    ("README.md", "# FastAPI Project Starter\n"),
]

API_FILES: List[Tuple[str, str]] = [
    # Entry point
    ("api/main.py", MAIN_PY),
    ("api/middleware.py", "# Custom middleware (CORS, Logging, etc.)\n"),
    # Config
    ("api/.config/__init__.py", ""),
    ("api/.config/settings.py", "# App configuration settings\n"),
    ("api/.config/db/connection.py", "# Database connection handling\n"),
    ("api/.config/security.py", "# Security configurations (JWT, Password Hashing)\n"),
    # Routers
    ("api/routers/__init__.py", ""),
    ("api/routers/v1/__init__.py", ""),
    ("api/routers/v1/dependencies.py", "# Shared route dependencies (e.g., auth)\n"),
    ("api/routers/v1/auth.py", "# Auth endpoints: login, token, register\n"),
    ("api/routers/v1/user.py", "# User-related endpoints (CRUD)\n"),
    # Models
    ("api/models/__init__.py", ""),
    ("api/models/base.py", "# Base Pydantic models (shared schemas)\n"),
    ("api/models/auth.py", "# Auth-related models (Login, Token)\n"),
    ("api/models/user.py", "# User-related models (UserInDB, Profile)\n"),
    # Schemas
    ("api/schemas/__init__.py", ""),
    ("api/schemas/base.py", "# Base DB models for ORM mapping\n"),
    # Services
    ("api/services/__init__.py", ""),
    ("api/services/user_management.py", "# Business logic for user operations (signup, login)\n"),
    # Utils
    ("api/utils/__init__.py", ""),
    ("api/utils/helpers.py", "# Helper functions, constants, formatting, etc.\n"),
    # Tests
    ("api/tests/__init__.py", ""),
    ("api/tests/conftest.py", "# Pytest shared fixtures (e.g., test client)\n"),
]

# Directories with no placeholder file of their own
EXTRA_DIRECTORIES: List[str] = [
    "api/tests/unit",
    "api/tests/integration",
]


def _directories_for(paths: List[str]) -> List[str]:
    """Every ancestor directory of `paths`, parents before children, first-seen order."""
    seen: Dict[str, None] = {}
    for path in paths:
        parts = PurePosixPath(path).parts
        for depth in range(1, len(parts) + 1):
            seen.setdefault(str(PurePosixPath(*parts[:depth])), None)
    return list(seen)


@lru_cache(maxsize=1)
def build_blueprint() -> Blueprint:
    """Assemble the FastAPI layout. Cached; treat the result as read-only."""
    placeholders = [PlaceholderFile(path=p, content=c, base=True) for p, c in BASE_FILES]
    placeholders += [PlaceholderFile(path=p, content=c) for p, c in API_FILES]

    file_dirs = [str(PurePosixPath(p).parent) for p, _ in API_FILES]
    dirs = _directories_for(file_dirs + EXTRA_DIRECTORIES)

    return Blueprint(name="fastapi", directories=dirs, files=placeholders)


def directories() -> List[str]:
    return list(build_blueprint().directories)


def files() -> List[PlaceholderFile]:
    return list(build_blueprint().files)


def render_tree(root_name: str = "<project>") -> str:
    """
    Render the layout as an indented tree, files before subdirectories.

    Example:
        <project>/
        ├── .env
        └── api/
            └── main.py
    """
    blueprint = build_blueprint()

    children: Dict[str, List[Tuple[str, bool]]] = {"": []}
    for directory in blueprint.directories:
        parent = str(PurePosixPath(directory).parent)
        parent = "" if parent == "." else parent
        children.setdefault(parent, []).append((directory, True))
        children.setdefault(directory, [])
    for placeholder in blueprint.files:
        children.setdefault(placeholder.parent or "", []).append((placeholder.path, False))

    lines = [f"{root_name}/"]

    def walk(node: str, prefix: str) -> None:
        entries = sorted(children.get(node, []), key=lambda e: e[1])
        for index, (path, is_dir) in enumerate(entries):
            last = index == len(entries) - 1
            label = PurePosixPath(path).name + ("/" if is_dir else "")
            lines.append(f"{prefix}{'└── ' if last else '├── '}{label}")
            if is_dir:
                walk(path, prefix + ("    " if last else "│   "))

    walk("", "")
    return "\n".join(lines)

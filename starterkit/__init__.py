"""
Starter Kit — Package Initializer
==================================

What:  Scaffolding tool and style guide for FastAPI backends.

Architecture Note:

    ┌─────────────────────────────────────┐
    │        CLI (starterkit.main)        │  ← argparse, exit codes, printing
    ├─────────────────────────────────────┤
    │     Services (project, env, file)   │  ← scaffold workflow
    ├─────────────────────────────────────┤
    │    Blueprint & Schemas (pydantic)   │  ← fixed layout, result records
    ├─────────────────────────────────────┤
    │   Filesystem / venv / pip (I/O)     │  ← aiofiles, asyncio subprocesses
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"

# Services package init
"""
Starter Kit — Services Layer
=============================

Service Inventory:
    - FileService: directory creation and placeholder writes (aiofiles)
    - EnvironmentService: venv creation, pip install, pip freeze
    - ProjectService: orchestrates name → files → venv → api/ tree
    - guide_service: loads the bundled style guide
"""

from starterkit.schemas.blueprint import (
    Blueprint,
    PlaceholderFile,
    ProjectName,
    ScaffoldResult,
)

__all__ = ["Blueprint", "PlaceholderFile", "ProjectName", "ScaffoldResult"]

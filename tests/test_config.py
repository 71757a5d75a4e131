"""
Starter Kit — Configuration Tests
==================================

What:  Settings parsing and validation, and how the settings steer a run.
How:   `Settings(...)` is built directly for parsing checks; the shared
       `settings` singleton is patched with monkeypatch for behavior checks.
"""

import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from starterkit.config import Settings, settings
from starterkit.main import main, setup_logging


class TestSettingsParsing:

    def test_defaults(self):
        config = Settings()
        assert config.venv_dir == "venv"
        assert config.create_venv is True
        assert config.upgrade_pip is True

    def test_packages_list_default(self):
        assert Settings(packages="fastapi,uvicorn[standard]").packages_list == [
            "fastapi",
            "uvicorn[standard]",
        ]

    def test_packages_list_ignores_blanks_and_whitespace(self):
        config = Settings(packages=" fastapi , ,uvicorn[standard],  ")
        assert config.packages_list == ["fastapi", "uvicorn[standard]"]

    def test_packages_list_empty(self):
        assert Settings(packages=" , ").packages_list == []

    def test_log_level_is_uppercased(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError, match="Invalid log_level"):
            Settings(log_level="verbose")

    def test_command_timeout_bounds(self):
        with pytest.raises(PydanticValidationError):
            Settings(command_timeout=1)

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("STARTERKIT_UPGRADE_PIP", "false")
        monkeypatch.setenv("STARTERKIT_PACKAGES", "fastapi")
        monkeypatch.setenv("STARTERKIT_VENV_DIR", ".venv")

        config = Settings()

        assert config.upgrade_pip is False
        assert config.packages_list == ["fastapi"]
        assert config.venv_dir == ".venv"


class TestSettingsDriveScaffold:

    @pytest.mark.asyncio
    async def test_upgrade_pip_disabled_skips_upgrade(self, project_service, mock_environment, workspace, monkeypatch):
        monkeypatch.setattr(settings, "upgrade_pip", False)

        await project_service.create_project("demo", parent_dir=workspace)

        mock_environment.upgrade_pip.assert_not_awaited()
        mock_environment.install.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_configured_packages_are_installed(self, project_service, mock_environment, workspace, monkeypatch):
        monkeypatch.setattr(settings, "packages", "fastapi, sqlalchemy")

        await project_service.create_project("demo", parent_dir=workspace)

        venv_path = workspace / "demo" / "venv"
        mock_environment.install.assert_awaited_once_with(venv_path, ["fastapi", "sqlalchemy"])

    @pytest.mark.asyncio
    async def test_create_venv_disabled(self, project_service, mock_environment, workspace, monkeypatch):
        monkeypatch.setattr(settings, "create_venv", False)

        result = await project_service.create_project("demo", parent_dir=workspace)

        assert result.venv_path is None
        mock_environment.create_venv.assert_not_awaited()


class TestLogLevel:

    def test_setup_logging_uses_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "log_level", "ERROR")
        setup_logging()
        assert logging.getLogger().level == logging.ERROR

    def test_cli_flag_overrides_settings(self, monkeypatch, capsys):
        monkeypatch.setattr(settings, "log_level", "ERROR")

        assert main(["--log-level", "debug", "layout"]) == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_cli_rejects_unknown_level(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "loud", "layout"])
        assert exc_info.value.code == 2

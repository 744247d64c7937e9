from __future__ import annotations

from typing import Protocol

from .model import CompanySettings


class SettingsRepository(Protocol):
    def get_settings(self) -> CompanySettings:
        """Return the singleton row, or defaults when none is stored."""

        raise NotImplementedError


class StaticSettingsRepository(SettingsRepository):
    """Settings fixed at construction time (batch jobs, tests)."""

    def __init__(self, settings: CompanySettings | None = None):
        self._settings = settings or CompanySettings()

    def get_settings(self) -> CompanySettings:
        return self._settings

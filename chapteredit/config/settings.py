"""Persistent application settings backed by QSettings."""

from PyQt6.QtCore import QSettings

from chapteredit.config.constants import APP_NAME, ORG_NAME


class AppSettings:
    """Thin wrapper around QSettings for typed access to editor preferences."""

    def __init__(self) -> None:
        self._qs = QSettings(ORG_NAME, APP_NAME)

    # --- window geometry ---

    def save_window_geometry(self, geometry: bytes) -> None:
        self._qs.setValue("window/geometry", geometry)

    def window_geometry(self) -> bytes | None:
        val = self._qs.value("window/geometry")
        if isinstance(val, bytes):
            return val
        return None

    # --- editor behaviour ---

    def single_expansion_enabled(self) -> bool:
        val = self._qs.value("editor/singleExpansion", True)
        if isinstance(val, str):
            return val.lower() not in ("false", "0")
        return bool(val)

    def set_single_expansion_enabled(self, enabled: bool) -> None:
        self._qs.setValue("editor/singleExpansion", enabled)

"""Display preferences persisted as a small JSON key-value file.

File layout:
    {
      "DARK_MODE": false,
      "FONT_SIZE_INDEX": 1
    }

Usage:
    store = PreferencesStore("~/.unitconverter/preferences.json")
    prefs = store.load()
    store.set_font_size(2)
    store.toggle_dark_mode()
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, replace
from enum import IntEnum
from pathlib import Path

logger = logging.getLogger(__name__)


# ── Constants ────────────────────────────────────────────────────────────────

PREFS_DARK_MODE = "DARK_MODE"
PREFS_FONT_SIZE_INDEX = "FONT_SIZE_INDEX"


class FontSize(IntEnum):
    SMALL = 0
    MEDIUM = 1
    LARGE = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


# ── Exceptions ────────────────────────────────────────────────────────────────

class InvalidPreferencesError(ValueError):
    """Raised when stored or requested preference values are not usable."""

    def __init__(self, reason: str, path: str | None = None) -> None:
        where = f" in '{path}'" if path else ""
        super().__init__(f"Invalid preferences{where}: {reason}")


# ── Model ─────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class DisplayPreferences:
    dark_mode: bool = False
    font_size: FontSize = FontSize.MEDIUM

    def as_dict(self) -> dict:
        return {
            "dark_mode": self.dark_mode,
            "font_size": int(self.font_size),
            "font_size_label": self.font_size.label,
        }


def parse_font_size(index: object, path: str | None = None) -> FontSize:
    """Validate a font size index (0=small, 1=medium, 2=large)."""
    # bool is an int subclass; True must not read as "medium".
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidPreferencesError(f"font size index must be an integer, got {index!r}", path)
    try:
        return FontSize(index)
    except ValueError:
        raise InvalidPreferencesError(
            f"font size index must be one of {[int(f) for f in FontSize]}, got {index}",
            path,
        ) from None


# ── PreferencesStore ──────────────────────────────────────────────────────────

class PreferencesStore:
    """Reads and writes the two display preferences under fixed keys."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> DisplayPreferences:
        """Return stored preferences, or defaults if nothing has been saved yet.

        Raises:
            InvalidPreferencesError: If the file is not valid JSON or holds
                                     values of the wrong type or range.
        """
        if not self._path.is_file():
            return DisplayPreferences()

        data = self._read_json(self._path)
        if not isinstance(data, dict):
            raise InvalidPreferencesError("top-level value must be an object", str(self._path))

        dark_mode = data.get(PREFS_DARK_MODE, False)
        if not isinstance(dark_mode, bool):
            raise InvalidPreferencesError(
                f"'{PREFS_DARK_MODE}' must be a boolean, got {dark_mode!r}", str(self._path)
            )
        font_size = parse_font_size(data.get(PREFS_FONT_SIZE_INDEX, int(FontSize.MEDIUM)), str(self._path))
        return DisplayPreferences(dark_mode=dark_mode, font_size=font_size)

    def save(self, prefs: DisplayPreferences) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(
                {PREFS_DARK_MODE: prefs.dark_mode, PREFS_FONT_SIZE_INDEX: int(prefs.font_size)},
                indent=2,
            ),
            encoding="utf-8",
        )
        logger.info(
            "Saved preferences to %s (dark_mode=%s, font_size=%s)",
            self._path, prefs.dark_mode, prefs.font_size.label,
        )

    # ── Updates ──────────────────────────────────────────────────────────────
    #
    # Each setter starts from `base` when given (the preferences in use),
    # so a corrupt file is overwritten rather than read again.

    def set_dark_mode(self, enabled: bool, base: DisplayPreferences | None = None) -> DisplayPreferences:
        prefs = replace(base if base is not None else self.load(), dark_mode=bool(enabled))
        self.save(prefs)
        return prefs

    def toggle_dark_mode(self, base: DisplayPreferences | None = None) -> DisplayPreferences:
        current = base if base is not None else self.load()
        return self.set_dark_mode(not current.dark_mode, base=current)

    def set_font_size(self, index: int, base: DisplayPreferences | None = None) -> DisplayPreferences:
        """Store a new font size index.

        Raises:
            InvalidPreferencesError: If index is not 0, 1 or 2, or if no base
                                     is given and the stored file is invalid.
        """
        font_size = parse_font_size(index)
        prefs = replace(base if base is not None else self.load(), font_size=font_size)
        self.save(prefs)
        return prefs

    @staticmethod
    def _read_json(path: Path) -> object:
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise InvalidPreferencesError(f"not valid JSON: {exc}", str(path)) from exc

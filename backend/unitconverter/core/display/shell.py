"""Display shell: owns the display config and pushes text size to its panels."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Protocol

from unitconverter.core.preferences.preferences_store import DisplayPreferences, FontSize

logger = logging.getLogger(__name__)

DEFAULT_TEXT_SIZES = {
    FontSize.SMALL: 14.0,
    FontSize.MEDIUM: 16.0,
    FontSize.LARGE: 20.0,
}


class DisplayCollaborator(Protocol):
    def apply_display_scale(self, size: float) -> None:
        """Apply a text size in sp."""


@dataclass
class DisplayConfig:
    preferences: DisplayPreferences = field(default_factory=DisplayPreferences)
    text_sizes: dict[FontSize, float] = field(default_factory=lambda: dict(DEFAULT_TEXT_SIZES))

    @property
    def dark_mode(self) -> bool:
        return self.preferences.dark_mode

    @property
    def font_size(self) -> FontSize:
        return self.preferences.font_size

    @property
    def text_size(self) -> float:
        return self.text_sizes[self.preferences.font_size]

    def as_dict(self) -> dict:
        data = self.preferences.as_dict()
        data["text_size"] = self.text_size
        return data


class DisplayShell:
    """Top-level owner of DisplayConfig.

    Collaborators are registered explicitly; every preference change is
    pushed to each of them in registration order.
    """

    def __init__(self, config: DisplayConfig | None = None) -> None:
        self.config = config or DisplayConfig()
        self._collaborators: list[DisplayCollaborator] = []

    @property
    def collaborators(self) -> list[DisplayCollaborator]:
        return list(self._collaborators)

    def register(self, collaborator: DisplayCollaborator) -> DisplayCollaborator:
        self._collaborators.append(collaborator)
        collaborator.apply_display_scale(self.config.text_size)
        return collaborator

    def apply_preferences(self, prefs: DisplayPreferences) -> None:
        self.config = replace(self.config, preferences=prefs)
        size = self.config.text_size
        for collaborator in self._collaborators:
            collaborator.apply_display_scale(size)
        logger.debug("Applied text size %.1f sp to %d panel(s)", size, len(self._collaborators))

"""Pages of the application and the transitions between them."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class SettingsMenu(enum.Enum):
    GENERAL = "general"
    ADVANCED = "advanced"


class PageKind(enum.Enum):
    HOME = "home"
    SETTINGS = "settings"


@dataclass
class Page:
    """A page; the settings page carries its current submenu."""

    kind: PageKind
    submenu: Optional[SettingsMenu] = None

    @staticmethod
    def home() -> "Page":
        return Page(PageKind.HOME)

    @staticmethod
    def settings(submenu: SettingsMenu) -> "Page":
        if not isinstance(submenu, SettingsMenu):
            raise TypeError(f"expected a SettingsMenu, got {submenu!r}")
        return Page(PageKind.SETTINGS, submenu)


class TransitionKind(enum.Enum):
    TO = "to"
    QUIT = "quit"
    REFRESH = "refresh"


@dataclass(frozen=True)
class Transition:
    """What an event handler asks the application to do next."""

    kind: TransitionKind
    page: Optional[Page] = None

    @staticmethod
    def to(page: Page) -> "Transition":
        if not isinstance(page, Page):
            raise TypeError(f"expected a Page, got {page!r}")
        return Transition(TransitionKind.TO, page)

    @staticmethod
    def quit() -> "Transition":
        return Transition(TransitionKind.QUIT)

    @staticmethod
    def refresh() -> "Transition":
        return Transition(TransitionKind.REFRESH)
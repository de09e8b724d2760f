import pytest

from cerberus_tui.navigation import (
    Page,
    PageKind,
    SettingsMenu,
    Transition,
    TransitionKind,
)


def test_home_page_has_no_submenu():
    page = Page.home()
    assert page.kind is PageKind.HOME
    assert page.submenu is None


def test_settings_page_keeps_submenu():
    page = Page.settings(SettingsMenu.ADVANCED)
    assert page.kind is PageKind.SETTINGS
    assert page.submenu is SettingsMenu.ADVANCED


def test_settings_submenu_can_change():
    page = Page.settings(SettingsMenu.GENERAL)
    page.submenu = SettingsMenu.ADVANCED
    assert page == Page.settings(SettingsMenu.ADVANCED)


def test_settings_rejects_non_menu():
    with pytest.raises(TypeError):
        Page.settings("general")


def test_pages_compare_by_value():
    assert Page.home() == Page.home()
    assert Page.home() != Page.settings(SettingsMenu.GENERAL)


def test_transition_to_carries_page():
    page = Page.settings(SettingsMenu.GENERAL)
    transition = Transition.to(page)
    assert transition.kind is TransitionKind.TO
    assert transition.page is page


def test_transition_to_rejects_non_page():
    with pytest.raises(TypeError):
        Transition.to(PageKind.HOME)


@pytest.mark.parametrize(
    "factory, kind",
    [(Transition.quit, TransitionKind.QUIT), (Transition.refresh, TransitionKind.REFRESH)],
)
def test_transitions_without_page(factory, kind):
    transition = factory()
    assert transition.kind is kind
    assert transition.page is None
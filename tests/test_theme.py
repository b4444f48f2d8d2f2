from boostme import theme


def test_toggle_theme_flips_between_presets(monkeypatch):
    state = {}
    monkeypatch.setattr(theme.st, "session_state", state)

    assert theme.get_active_theme()[0] == "light"
    theme.toggle_theme()
    assert state["ui_theme"] == "dark"
    assert theme.get_active_theme()[1] == theme.THEME_PRESETS["dark"]
    theme.toggle_theme()
    assert state["ui_theme"] == "light"


def test_unknown_theme_resets_to_light(monkeypatch):
    monkeypatch.setattr(theme.st, "session_state", {"ui_theme": "sepia"})
    assert theme.ensure_theme_state() == "light"


def test_theme_toggle_label():
    assert theme.theme_toggle_label("dark") == ("☀️", "Switch to light mode")
    assert theme.theme_toggle_label("light") == ("🌙", "Switch to dark mode")


def test_mascot_html_escapes_text():
    markup = theme.mascot_html("happy", "<b>hi</b>", "😊")
    assert "&lt;b&gt;hi&lt;/b&gt;" in markup
    assert theme.MASCOT_COLORS["happy"] in markup

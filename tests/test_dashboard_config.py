from leverage_dashboard import config


def test_api_settings_present():
    assert config.API_URL.startswith("https://")
    assert not config.API_URL.endswith("/")
    assert config.REMEMBER_TOKEN_KEY == "tastytradeRememberToken"


def test_display_fields_have_labels():
    for name in config.DISPLAY_FIELDS:
        assert name in config.FIELD_LABELS


def test_light_theme_colors():
    assert config.COLORS["background"] == "#f7f7f5"

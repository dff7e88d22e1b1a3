"""Tests for application settings."""

from studio.config import Settings


def test_defaults():
    cfg = Settings(_env_file=None)
    assert cfg.studio_log_level == "debug"
    assert cfg.max_animation_frames == 600
    assert cfg.default_palette == "Aurora"
    assert set(Settings.model_fields) == {
        "studio_log_level",
        "cors_origins",
        "max_animation_frames",
        "default_palette",
    }


def test_env_override(monkeypatch):
    monkeypatch.setenv("MAX_ANIMATION_FRAMES", "120")
    monkeypatch.setenv("DEFAULT_PALETTE", "Ocean")
    cfg = Settings(_env_file=None)
    assert cfg.max_animation_frames == 120
    assert cfg.default_palette == "Ocean"

"""Tests for the preview command line."""

import pytest

pytest.importorskip("pygame")

import main  # noqa: E402


class FakePreview:
    started = []

    def __init__(self, effect):
        self.effect = effect

    def start(self):
        FakePreview.started.append(self.effect)


@pytest.fixture
def fake_preview(monkeypatch):
    FakePreview.started = []
    monkeypatch.setattr(main, "KeyboardPreview", FakePreview)
    monkeypatch.setattr(main.logging, "basicConfig", lambda **kwargs: None)
    return FakePreview


class TestLogLevel:
    def test_unknown_level_is_usage_error(self, fake_preview):
        with pytest.raises(SystemExit) as excinfo:
            main.main(["--log-level", "verbose"])
        assert excinfo.value.code == 2
        assert fake_preview.started == []

    def test_lowercase_level_accepted(self, fake_preview):
        main.main(["--log-level", "debug", "--effect", "flash"])
        assert [effect.name for effect in fake_preview.started] == ["flash"]


def test_blink_logo_reaches_heatmap(fake_preview):
    main.main(["--effect", "heatmap", "--blink-logo"])
    assert fake_preview.started[0].blink_logo

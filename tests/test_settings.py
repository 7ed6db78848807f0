from voicera.core.settings import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("VOICERA_DETECTION_INTERVAL", raising=False)
    s = Settings()
    assert s.DETECTION_INTERVAL == 1.0
    assert s.SERVER_PORT == 7860
    assert s.SHARE is False


def test_env_overrides_are_typed(monkeypatch):
    monkeypatch.setenv("VOICERA_SERVER_PORT", "8080")
    monkeypatch.setenv("VOICERA_DETECTION_INTERVAL", "0.5")
    monkeypatch.setenv("VOICERA_SHARE", "true")
    monkeypatch.setenv("VOICERA_DETECTOR_BACKEND", "retinaface")

    s = Settings()

    assert s.SERVER_PORT == 8080
    assert s.DETECTION_INTERVAL == 0.5
    assert s.SHARE is True
    assert s.DETECTOR_BACKEND == "retinaface"


def test_repaint_delay():
    s = Settings()
    s.REPAINT_FPS = 20
    assert s.repaint_delay == 0.05
    s.REPAINT_FPS = 0
    assert s.repaint_delay == 0.0

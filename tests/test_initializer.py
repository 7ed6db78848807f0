from voicera.core import initializer
from voicera.core.initializer import ATTRIBUTE_MODELS, ModelInitializer


def test_initialize_builds_detector_and_attribute_models(monkeypatch):
    built = []
    monkeypatch.setattr(initializer.DeepFace, "build_model",
                        lambda model_name, task: built.append((model_name, task)))

    assert ModelInitializer.initialize() is True
    assert built[0] == (initializer.settings.DETECTOR_BACKEND, 'face_detector')
    assert built[1:] == [(name, 'facial_attribute') for name in ATTRIBUTE_MODELS]


def test_initialize_reports_failure(monkeypatch):
    def broken(model_name, task):
        raise OSError("weights download failed")

    monkeypatch.setattr(initializer.DeepFace, "build_model", broken)
    assert ModelInitializer.initialize() is False

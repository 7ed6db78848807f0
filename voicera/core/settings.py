"""
Runtime settings for the Voicera app.

Defaults live on the dataclass; any field can be overridden with an
environment variable named ``VOICERA_<FIELD>`` (e.g. ``VOICERA_SERVER_PORT``).
"""
import os
from dataclasses import dataclass, fields

ENV_PREFIX = "VOICERA_"


def _coerce(raw: str, current):
    if isinstance(current, bool):
        return raw.strip().lower() in ("1", "true", "yes", "on")
    if isinstance(current, int):
        return int(raw)
    if isinstance(current, float):
        return float(raw)
    return raw


@dataclass
class Settings:
    # === CAMERA ===
    CAMERA_INDEX: int = 0
    CAMERA_WIDTH: int = 640
    CAMERA_HEIGHT: int = 480

    # === DETECTION ===
    DETECTOR_BACKEND: str = "opencv"
    DETECTION_INTERVAL: float = 1.0      # at most one detection per second
    LIVE_INPUT_SIZE: int = 416           # longest side fed to the model while streaming
    REPAINT_FPS: int = 30

    # === SERVER ===
    SERVER_NAME: str = "127.0.0.1"
    SERVER_PORT: int = 7860
    SHARE: bool = False

    # === LOGGING ===
    LOG_LEVEL: str = "INFO"

    def __post_init__(self):
        self._load_from_env()

    def _load_from_env(self):
        for f in fields(self):
            raw = os.environ.get(ENV_PREFIX + f.name)
            if raw is not None and raw != "":
                setattr(self, f.name, _coerce(raw, getattr(self, f.name)))

    @property
    def repaint_delay(self) -> float:
        return 1.0 / self.REPAINT_FPS if self.REPAINT_FPS > 0 else 0.0


settings = Settings()

import logging
from deepface import DeepFace
from voicera.core.settings import settings

logger = logging.getLogger(__name__)

ATTRIBUTE_MODELS = ('Emotion', 'Age', 'Gender')


class ModelInitializer:
    @staticmethod
    def initialize():
        try:
            ModelInitializer._setup_face_detector()
            ModelInitializer._setup_attribute_models()
            logger.info("✅ Models loaded")
            return True
        except Exception as e:
            logger.error("❌ Model initialization error: %s", e, exc_info=True)
            return False

    @staticmethod
    def _setup_face_detector():
        backend = settings.DETECTOR_BACKEND
        DeepFace.build_model(model_name=backend, task='face_detector')
        logger.info("📋 Face detector ready: %s", backend)

    @staticmethod
    def _setup_attribute_models():
        for name in ATTRIBUTE_MODELS:
            DeepFace.build_model(model_name=name, task='facial_attribute')
            logger.info("📋 %s model ready", name)

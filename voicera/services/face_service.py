import logging
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional, Tuple

import cv2
import numpy as np
from deepface import DeepFace
from deepface.modules.exceptions import FaceNotDetected

from voicera.core.settings import settings

logger = logging.getLogger(__name__)

LANDMARK_KEYS = ('left_eye', 'right_eye', 'nose', 'mouth_left', 'mouth_right')
GENDER_LABELS = {'Man': 'male', 'Woman': 'female'}


@dataclass
class Box:
    x: float
    y: float
    width: float
    height: float


@dataclass
class Detection:
    box: Box
    score: float
    landmarks: List[Tuple[float, float]] = field(default_factory=list)
    expressions: Dict[str, float] = field(default_factory=dict)
    age: float = 0.0
    gender: str = ''
    gender_probability: float = 0.0


def resize_results(detections, scale_x, scale_y):
    """Map detections into another coordinate space"""
    resized = []
    for det in detections:
        box = Box(
            det.box.x * scale_x,
            det.box.y * scale_y,
            det.box.width * scale_x,
            det.box.height * scale_y,
        )
        landmarks = [(px * scale_x, py * scale_y) for px, py in det.landmarks]
        resized.append(replace(det, box=box, landmarks=landmarks))
    return resized


def _to_detection(result):
    region = result.get('region') or {}
    box = Box(
        float(region.get('x', 0)),
        float(region.get('y', 0)),
        float(region.get('w', 0)),
        float(region.get('h', 0)),
    )

    landmarks = []
    for key in LANDMARK_KEYS:
        point = region.get(key)
        if point is not None:
            landmarks.append((float(point[0]), float(point[1])))

    # deepface reports percentages
    expressions = {
        name: float(value) / 100.0
        for name, value in (result.get('emotion') or {}).items()
    }

    dominant = result.get('dominant_gender', '')
    gender_scores = result.get('gender') or {}
    gender_probability = float(gender_scores.get(dominant, 0.0)) / 100.0

    return Detection(
        box=box,
        score=float(result.get('face_confidence', 0.0)),
        landmarks=landmarks,
        expressions=expressions,
        age=float(result.get('age', 0)),
        gender=GENDER_LABELS.get(dominant, dominant.lower()),
        gender_probability=gender_probability,
    )


class FaceService:

    @staticmethod
    def detect_all_faces(image: np.ndarray, input_size: Optional[int] = None) -> List[Detection]:
        """Detect every face in an RGB image with expressions, age and gender"""
        if image is None:
            return []

        h, w = image.shape[:2]
        scale = 1.0
        frame = image
        if input_size and max(h, w) > input_size:
            scale = input_size / float(max(h, w))
            frame = cv2.resize(image, (max(1, int(w * scale)), max(1, int(h * scale))))

        # deepface expects BGR like cv2.imread
        bgr = cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)
        try:
            results = DeepFace.analyze(
                img_path=bgr,
                actions=('emotion', 'age', 'gender'),
                detector_backend=settings.DETECTOR_BACKEND,
                enforce_detection=True,
                silent=True,
            )
        except FaceNotDetected:
            return []

        if isinstance(results, dict):
            results = [results]

        detections = [_to_detection(r) for r in results]
        if scale != 1.0:
            detections = resize_results(detections, 1.0 / scale, 1.0 / scale)

        logger.debug("🔍 %d face(s) detected", len(detections))
        return detections

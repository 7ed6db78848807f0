import logging
import numpy as np
from PIL import Image

from voicera.core.state import app_state
from voicera.services import drawing_service as draw
from voicera.services.face_service import FaceService

logger = logging.getLogger(__name__)

SCAN_SUCCESS = "✅ Image scanned successfully!"
SCAN_NO_FACE = "⚠️ No face detected in uploaded image."


class ImageService:

    @staticmethod
    def handle_upload(image_path):
        """Remember the uploaded file and reset the status"""
        app_state.image_path = image_path or None
        app_state.scan_message = ""
        return app_state.image_path

    @staticmethod
    def load_image(image_path):
        with Image.open(image_path) as img:
            return np.array(img.convert('RGB'))

    @staticmethod
    def scan(image_path):
        """
        Detect faces in an uploaded image at full resolution.

        Returns (annotated_image, message, detections). With no face found
        the image is returned without annotations.
        """
        image = ImageService.load_image(image_path)
        h, w = image.shape[:2]
        canvas = draw.match_dimensions(w, h)

        detections = FaceService.detect_all_faces(image)
        if detections:
            draw.draw_all(canvas, detections)
            message = SCAN_SUCCESS
        else:
            message = SCAN_NO_FACE

        app_state.scan_message = message
        logger.info("🖼️ Scanned %s: %d face(s)", image_path, len(detections))
        return draw.composite(image, canvas), message, detections

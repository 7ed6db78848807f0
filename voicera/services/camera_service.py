import logging
import threading
import cv2
from voicera.core.settings import settings
from voicera.core.state import app_state

logger = logging.getLogger(__name__)

# read() and release() run on different Gradio worker threads
_capture_lock = threading.Lock()


class CameraAccessError(RuntimeError):
    """Camera could not be opened (denied, busy or missing)"""


class CameraService:

    @staticmethod
    def start():
        """Open the camera and keep the handle in app state"""
        with _capture_lock:
            if app_state.stream is not None:
                return app_state.stream

            camera = cv2.VideoCapture(settings.CAMERA_INDEX)
            if not camera.isOpened():
                camera.release()
                raise CameraAccessError("Cannot open camera %s" % settings.CAMERA_INDEX)

            camera.set(cv2.CAP_PROP_FRAME_WIDTH, settings.CAMERA_WIDTH)
            camera.set(cv2.CAP_PROP_FRAME_HEIGHT, settings.CAMERA_HEIGHT)
            camera.set(cv2.CAP_PROP_BUFFERSIZE, 1)

            app_state.stream = camera
        logger.info("📹 Camera opened")
        return camera

    @staticmethod
    def read():
        """Current frame as RGB, or None when there is no stream"""
        with _capture_lock:
            camera = app_state.stream
            if camera is None:
                return None
            ret, frame = camera.read()

        if not ret:
            return None
        return cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

    @staticmethod
    def stop():
        """Release the stream; waits for an in-flight read and is safe to repeat"""
        with _capture_lock:
            camera = app_state.stream
            if camera is None:
                return False
            camera.release()
            app_state.stream = None
        logger.info("📹 Camera released")
        return True

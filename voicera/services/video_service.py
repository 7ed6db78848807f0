import itertools
import logging
import time

from voicera.core.settings import settings
from voicera.core.state import app_state, set_webcam_on
from voicera.services import drawing_service as draw
from voicera.services.camera_service import CameraService
from voicera.services.face_service import FaceService

logger = logging.getLogger(__name__)

_frame_handles = itertools.count(1)


class DetectionThrottle:
    """Allows one detection per elapsed interval of clock time"""

    def __init__(self, interval=1.0, clock=time.monotonic):
        self.interval = interval
        self.clock = clock
        self.last_detection_time = None

    def ready(self):
        now = self.clock()
        if self.last_detection_time is None or now - self.last_detection_time > self.interval:
            self.last_detection_time = now
            return True
        return False


class VideoService:

    @staticmethod
    def request_frame():
        """Arm a new frame handle; any older loop sees a mismatch and exits"""
        handle = next(_frame_handles)
        app_state.frame_handle = handle
        return handle

    @staticmethod
    def cancel_frame():
        app_state.frame_handle = None

    @staticmethod
    def stream_webcam(throttle=None, sleep=None):
        """Yield webcam frames with the latest detections drawn over them"""
        if not app_state.is_webcam_on or app_state.stream is None:
            return

        throttle = throttle or DetectionThrottle(settings.DETECTION_INTERVAL)
        sleep = sleep or time.sleep
        handle = VideoService.request_frame()
        canvas = None
        detections_run = 0

        while app_state.frame_handle == handle:
            frame = CameraService.read()
            if frame is None:
                # stream dropped (unplugged or ended) rather than stopped by the user
                if app_state.frame_handle == handle:
                    logger.warning("⚠️ Camera stream ended")
                    CameraService.stop()
                    set_webcam_on(False)
                    VideoService.cancel_frame()
                break

            h, w = frame.shape[:2]
            if canvas is None or canvas.shape[:2] != (h, w):
                canvas = draw.match_dimensions(w, h)

            # hidden pages keep streaming but skip detection
            if app_state.page_visible and throttle.ready():
                detections = FaceService.detect_all_faces(frame, input_size=settings.LIVE_INPUT_SIZE)
                draw.clear(canvas)
                draw.draw_all(canvas, detections)
                detections_run += 1

            yield draw.composite(frame, canvas)
            sleep(settings.repaint_delay)

        logger.info("⏹️ Frame loop ended after %d detection(s)", detections_run)

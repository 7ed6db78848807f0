from .camera_service import CameraService, CameraAccessError
from .face_service import FaceService
from .image_service import ImageService
from .video_service import VideoService

__all__ = ['CameraService', 'CameraAccessError', 'FaceService', 'ImageService', 'VideoService']

import logging
import gradio as gr
from voicera.core.initializer import ModelInitializer
from voicera.core.state import app_state, set_webcam_on
from voicera.services.camera_service import CameraService, CameraAccessError
from voicera.services.image_service import ImageService
from voicera.services.video_service import VideoService

logger = logging.getLogger(__name__)

START_LABEL = "Start Webcam"
STOP_LABEL = "Stop Webcam"

FOOTER = "© Toni Thomas 2025 🩷"

CSS = """
.hidden-input { display: none !important; }
.footer-note { text-align: center; opacity: 0.7; }
.scan-message p { color: #2e7d32; font-weight: 600; }
.scan-message.warning p { color: #c62828; }
.camera-box { max-width: 800px; margin: 0 auto; }
"""

# Mirrors document.hidden into the hidden checkbox; clicking it fires .change
VISIBILITY_JS = """
() => {
    document.addEventListener("visibilitychange", () => {
        const box = document.querySelector("#page-visible input");
        if (box && box.checked === document.hidden) {
            box.click();
        }
    });
}
"""


def load_models():
    """Warm up detection models once per process"""
    if not app_state.models_loaded:
        app_state.models_loaded = ModelInitializer.initialize()
    return app_state.models_loaded


def webcam_label():
    return STOP_LABEL if app_state.is_webcam_on else START_LABEL


def start_video():
    """Acquire the camera; on failure log it and leave the toggle off"""
    try:
        CameraService.start()
    except CameraAccessError as e:
        logger.error("Error accessing webcam: %s", e)
        set_webcam_on(False)
        return False

    app_state.page_visible = True
    set_webcam_on(True)
    return True


def stop_video():
    """Cancel the pending frame and stop all tracks; safe to repeat"""
    if app_state.frame_handle is not None:
        VideoService.cancel_frame()

    CameraService.stop()
    set_webcam_on(False)


def toggle_webcam():
    new_state = not app_state.is_webcam_on
    set_webcam_on(new_state)
    if new_state:
        start_video()
    else:
        stop_video()
    return gr.update(value=webcam_label())


def run_detection_loop():
    """Stream annotated webcam frames until the webcam is stopped"""
    for frame in VideoService.stream_webcam():
        yield frame
    yield None


def refresh_webcam_button():
    return gr.update(value=webcam_label())


def set_page_visible(visible):
    """Hidden tabs keep streaming but pause detection"""
    app_state.page_visible = bool(visible)
    return app_state.page_visible


def page_closed():
    app_state.page_visible = False
    stop_video()


def handle_image_upload(image_path):
    ImageService.handle_upload(image_path)
    return None, scan_message_update("")


def detect_faces_in_image(image_path):
    if not image_path:
        return None, scan_message_update("")
    annotated, message, _ = ImageService.scan(image_path)
    return annotated, scan_message_update(message)


def scan_message_update(message):
    classes = ["scan-message"]
    if "⚠️" in message:
        classes.append("warning")
    return gr.update(value=message, visible=bool(message), elem_classes=classes)


def create_app():
    with gr.Blocks(title="Voicera Face Recognition App", theme=gr.themes.Soft(), css=CSS) as app:
        gr.Markdown("# Voicera Face Recognition App")

        with gr.Column(elem_classes=["camera-box"]):
            webcam_btn = gr.Button(webcam_label(), variant="primary")
            live_view = gr.Image(label="Webcam", interactive=False)
            page_visible = gr.Checkbox(
                value=True, label="Page visible", elem_id="page-visible", elem_classes=["hidden-input"]
            )

        gr.Markdown("---")
        gr.Markdown("## Upload an Image")

        with gr.Row():
            image_input = gr.Image(type="filepath", sources=["upload"], label="Image")
            image_output = gr.Image(label="Detections", interactive=False)

        scan_message = gr.Markdown("", visible=False, elem_classes=["scan-message"])
        gr.Markdown(FOOTER, elem_classes=["footer-note"])

        # Event handlers
        app.load(load_models)
        app.load(None, js=VISIBILITY_JS)
        page_visible.change(set_page_visible, inputs=[page_visible], queue=False)
        app.unload(page_closed)
        webcam_btn.click(toggle_webcam, outputs=[webcam_btn]).then(
            run_detection_loop, outputs=[live_view]
        ).then(
            refresh_webcam_button, outputs=[webcam_btn]
        )
        image_input.upload(
            handle_image_upload, inputs=[image_input], outputs=[image_output, scan_message]
        ).then(
            detect_faces_in_image, inputs=[image_input], outputs=[image_output, scan_message]
        )

    return app


if __name__ == "__main__":
    demo = create_app()
    demo.launch()

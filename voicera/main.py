import sys
import os

# Add parent directory to path so 'voicera' can be found when run as a script
parent_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, parent_dir)

from voicera.core.logging_config import setup_logging
from voicera.core.settings import settings
from voicera.ui.gradio_app import create_app


def run_app():
    setup_logging(settings.LOG_LEVEL)
    demo = create_app()
    demo.queue()
    demo.launch(
        share=settings.SHARE,
        server_name=settings.SERVER_NAME,
        server_port=settings.SERVER_PORT,
        show_error=True,
    )


if __name__ == "__main__":
    run_app()

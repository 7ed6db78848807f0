class AppState:
    def __init__(self):
        self.is_webcam_on = False
        self.stream = None
        self.frame_handle = None
        self.image_path = None
        self.scan_message = ""
        self.page_visible = True
        self.models_loaded = False

    def reset(self):
        self.__init__()


def set_webcam_on(value):
    """Store action: the only place the webcam flag changes"""
    app_state.is_webcam_on = bool(value)
    return app_state.is_webcam_on


app_state = AppState()

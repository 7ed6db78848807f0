"""
Canvas drawing helpers.

The canvas is a transparent RGBA array the size of the media it overlays.
Drawing functions rasterize detections onto it; ``composite`` lays it over an
RGB frame.
"""
import cv2
import numpy as np

BOX_COLOR = (0, 0, 255, 255)
LANDMARK_COLOR = (0, 255, 0, 255)
TEXT_COLOR = (255, 255, 255, 255)
TEXT_BACKGROUND = (0, 0, 0, 128)

FONT = cv2.FONT_HERSHEY_SIMPLEX
FONT_SCALE = 0.5
LINE_HEIGHT = 18

MIN_EXPRESSION_CONFIDENCE = 0.1


def match_dimensions(width, height):
    """Fresh transparent canvas matching the media size"""
    return np.zeros((int(height), int(width), 4), dtype=np.uint8)


def clear(canvas):
    canvas[:] = 0
    return canvas


def _text_box(canvas, text, x, y, color=TEXT_COLOR, background=TEXT_BACKGROUND):
    (tw, th), baseline = cv2.getTextSize(text, FONT, FONT_SCALE, 1)
    x, y = int(x), int(y)
    cv2.rectangle(canvas, (x, y - th - baseline), (x + tw + 4, y + baseline), background, -1)
    cv2.putText(canvas, text, (x + 2, y), FONT, FONT_SCALE, color, 1, cv2.LINE_AA)


def draw_detections(canvas, detections):
    for det in detections:
        b = det.box
        top_left = (int(b.x), int(b.y))
        bottom_right = (int(b.x + b.width), int(b.y + b.height))
        cv2.rectangle(canvas, top_left, bottom_right, BOX_COLOR, 2)
        _text_box(canvas, f"{det.score:.2f}", b.x, b.y + b.height + LINE_HEIGHT,
                  background=BOX_COLOR)


def draw_face_landmarks(canvas, detections):
    for det in detections:
        radius = max(2, int(det.box.width / 60))
        for px, py in det.landmarks:
            cv2.circle(canvas, (int(px), int(py)), radius, LANDMARK_COLOR, -1)


def draw_face_expressions(canvas, detections, min_confidence=MIN_EXPRESSION_CONFIDENCE):
    """List expressions above min_confidence under the box, strongest first"""
    for det in detections:
        ranked = sorted(det.expressions.items(), key=lambda kv: kv[1], reverse=True)
        y = det.box.y + det.box.height + 2 * LINE_HEIGHT
        for name, prob in ranked:
            if prob < min_confidence:
                continue
            _text_box(canvas, f"{name} ({prob:.2f})", det.box.x, y)
            y += LINE_HEIGHT


def draw_demographics(canvas, detections):
    for det in detections:
        label = f"{det.gender} ({round(det.gender_probability * 100)}%) Age: {round(det.age)}"
        x, y = int(det.box.x), int(det.box.y - 10)
        cv2.putText(canvas, label, (x, y), FONT, FONT_SCALE, TEXT_COLOR, 1, cv2.LINE_AA)


def draw_all(canvas, detections):
    draw_detections(canvas, detections)
    draw_face_landmarks(canvas, detections)
    draw_face_expressions(canvas, detections)
    draw_demographics(canvas, detections)
    return canvas


def composite(frame, canvas):
    """Alpha-blend the RGBA canvas over an RGB frame"""
    if canvas is None or canvas.shape[:2] != frame.shape[:2]:
        return frame
    alpha = canvas[..., 3:4].astype(np.float32) / 255.0
    blended = canvas[..., :3].astype(np.float32) * alpha + frame.astype(np.float32) * (1.0 - alpha)
    return blended.astype(np.uint8)

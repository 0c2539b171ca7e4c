"""Line buffer, word motion, text segmentation, undo stack and clipboard for line editing."""

__version__ = "0.1.0"

__all__ = [
    "clipboard",
    "edit_stack",
    "line_buffer",
    "segmentation",
    "words",
]
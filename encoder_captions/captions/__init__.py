from .window import CaptionsFn, CaptionWindow

__all__ = ["CaptionWindow", "CaptionsFn"]

from .image import DecodedImage, ImageSource, load_samples
from .rotate import RotatingView, rotate_coordinates

__all__ = ["DecodedImage", "ImageSource", "RotatingView", "load_samples", "rotate_coordinates"]

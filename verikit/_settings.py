from dataclasses import dataclass
from typing import List, Tuple

from PIL import Image

from .errors import InvalidImageSettings

RGBA = Tuple[int, int, int, int]


@dataclass
class ImageSettings:
    jpeg_quality: int = 100
    max_kilobytes: int = 100
    quality_step: int = 10
    resample: Image.Resampling = Image.Resampling.BICUBIC
    corner_fill: RGBA = (0, 0, 0, 0)


DEFAULT_IMAGE_SETTINGS = ImageSettings()


def validate_image_settings(settings: ImageSettings) -> ImageSettings:
    errors: List[str] = []
    if not 1 <= settings.jpeg_quality <= 100:
        errors += ["jpeg_quality should be an integer between 1 and 100"]
    if settings.max_kilobytes <= 0:
        errors += ["max_kilobytes should be a positive integer"]
    if settings.quality_step <= 0:
        errors += ["quality_step should be a positive integer"]
    if len(settings.corner_fill) != 4 or any(not 0 <= channel <= 255 for channel in settings.corner_fill):
        errors += ["corner_fill should be an RGBA tuple of values between 0 and 255"]

    if errors:
        raise InvalidImageSettings(errors)

    return settings

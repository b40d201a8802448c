import io
import logging
from os import PathLike
from typing import IO, Optional, Union

from PIL import ExifTags, Image, ImageDraw

from ._settings import DEFAULT_IMAGE_SETTINGS, ImageSettings, validate_image_settings
from .errors import InvalidDimensionsError

logger = logging.getLogger(__name__)

ImageSource = Union[str, PathLike, IO[bytes]]

ORIENTATION_DEGREES = {3: 180, 6: 90, 8: 270}
JPEG_MODES = ("1", "L", "RGB", "CMYK")
REDUCIBLE_MODES = ("L", "LA", "RGB", "RGBA", "I", "F", "CMYK")


def _resolve_settings(settings: Optional[ImageSettings]) -> ImageSettings:
    if settings is None:
        return DEFAULT_IMAGE_SETTINGS
    return validate_image_settings(settings)


def _check_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensionsError(width, height)


def _encode_jpeg(image: Image.Image, quality: int) -> bytes:
    if image.mode not in JPEG_MODES:
        image = image.convert("RGB")
    buffer = io.BytesIO()
    image.save(buffer, format="JPEG", quality=quality)
    return buffer.getvalue()


def _orientation_degrees(image: Image.Image) -> int:
    orientation = image.getexif().get(ExifTags.Base.Orientation, 1)
    return ORIENTATION_DEGREES.get(orientation, 0)


def calculate_in_sample_size(width: int, height: int, req_width: int, req_height: int) -> int:
    """Compute the power of two an image should be shrunk by to stay just above the requested size.

    The result is the largest power of two which keeps both halved dimensions, divided by it,
    greater than the requested ones. Images which already fit are not shrunk at all.

    Raises:
        InvalidDimensionsError: If a requested dimension is not positive.
    """
    _check_dimensions(req_width, req_height)

    sample_size = 1
    if height > req_height or width > req_width:
        half_height = height // 2
        half_width = width // 2
        while half_height // sample_size > req_height and half_width // sample_size > req_width:
            sample_size *= 2
    return sample_size


def get_picture_degree(path: ImageSource) -> int:
    """Clockwise rotation in degrees stored in the EXIF orientation tag, 0 when there is none"""
    try:
        with Image.open(path) as image:
            return _orientation_degrees(image)
    except OSError:
        logger.warning("Unable to read the orientation of %s", path, exc_info=True)
        return 0


def rotate_image(degrees: int, image: Image.Image, settings: Optional[ImageSettings] = None) -> Image.Image:
    settings = _resolve_settings(settings)
    # PIL rotates counter clockwise
    return image.rotate(-degrees, resample=settings.resample, expand=True)


def decode_image(source: ImageSource) -> Optional[Image.Image]:
    try:
        with Image.open(source) as image:
            return image.copy()
    except FileNotFoundError:
        logger.warning("Image %s does not exist", source)
        return None


def decode_scaled_image(
    path: ImageSource, out_width: int, out_height: int, settings: Optional[ImageSettings] = None
) -> Optional[Image.Image]:
    """Decode an image shrunk close to the requested size and turned upright.

    The image is reduced by the sample size from :func:`calculate_in_sample_size` and rotated
    according to its EXIF orientation. Returns ``None`` when the file cannot be decoded.
    """
    try:
        with Image.open(path) as image:
            degrees = _orientation_degrees(image)
            sample_size = calculate_in_sample_size(image.width, image.height, out_width, out_height)
            if sample_size > 1:
                source = image if image.mode in REDUCIBLE_MODES else image.convert("RGBA")
                decoded = source.reduce(sample_size)
            else:
                decoded = image.copy()
    except OSError:
        logger.warning("Unable to decode %s", path, exc_info=True)
        return None

    if degrees:
        return rotate_image(degrees, decoded, settings)
    return decoded


def get_rounded_corner_image(
    image: Optional[Image.Image], radius: float, settings: Optional[ImageSettings] = None
) -> Optional[Image.Image]:
    if image is None:
        return None
    settings = _resolve_settings(settings)

    mask = Image.new("L", image.size, 0)
    ImageDraw.Draw(mask).rounded_rectangle((0, 0, image.width - 1, image.height - 1), radius=radius, fill=255)

    output = Image.new("RGBA", image.size, settings.corner_fill)
    output.paste(image.convert("RGBA"), (0, 0), mask)
    return output


def save_as_jpeg(image: Image.Image, path: Union[str, PathLike], settings: Optional[ImageSettings] = None) -> bool:
    settings = _resolve_settings(settings)
    try:
        with open(path, "wb") as file:
            file.write(_encode_jpeg(image, settings.jpeg_quality))
    except OSError:
        logger.warning("Unable to save image to %s", path, exc_info=True)
        return False
    return True


def compress_image(image: Image.Image, settings: Optional[ImageSettings] = None) -> Image.Image:
    """Re-encode the image as JPEG, lowering the quality step by step until it fits ``max_kilobytes``.

    The quality never drops to zero, an image which still does not fit at the lowest quality is
    returned at that quality.
    """
    settings = _resolve_settings(settings)

    quality = settings.jpeg_quality
    encoded = _encode_jpeg(image, quality)
    while len(encoded) // 1024 > settings.max_kilobytes:
        if quality - settings.quality_step <= 0:
            logger.debug("Image still takes %d bytes at the lowest quality %d", len(encoded), quality)
            break
        quality -= settings.quality_step
        encoded = _encode_jpeg(image, quality)

    with Image.open(io.BytesIO(encoded)) as compressed:
        return compressed.copy()


def compress_fix_image(
    image: Image.Image, out_width: int, out_height: int, settings: Optional[ImageSettings] = None
) -> Image.Image:
    _check_dimensions(out_width, out_height)
    settings = _resolve_settings(settings)
    return image.resize((out_width, out_height), resample=settings.resample)

import pytest

from verikit._settings import DEFAULT_IMAGE_SETTINGS, ImageSettings, validate_image_settings
from verikit.errors import InvalidImageSettings, VerikitValueError


def test_default_settings() -> None:
    """It should be valid out of the box"""
    assert validate_image_settings(ImageSettings()) == DEFAULT_IMAGE_SETTINGS
    assert DEFAULT_IMAGE_SETTINGS.jpeg_quality == 100
    assert DEFAULT_IMAGE_SETTINGS.max_kilobytes == 100
    assert DEFAULT_IMAGE_SETTINGS.quality_step == 10


@pytest.mark.parametrize(
    "settings,error",
    [
        (ImageSettings(jpeg_quality=0), "jpeg_quality should be an integer between 1 and 100"),
        (ImageSettings(jpeg_quality=101), "jpeg_quality should be an integer between 1 and 100"),
        (ImageSettings(max_kilobytes=0), "max_kilobytes should be a positive integer"),
        (ImageSettings(quality_step=0), "quality_step should be a positive integer"),
        (ImageSettings(corner_fill=(0, 0, 256, 0)), "corner_fill should be an RGBA tuple"),
        (ImageSettings(corner_fill=(0, 0, 0)), "corner_fill should be an RGBA tuple"),  # type: ignore
    ],
)
def test_invalid_settings(settings: ImageSettings, error: str) -> None:
    """It should report what is wrong with the settings"""
    with pytest.raises(InvalidImageSettings) as exc_info:
        validate_image_settings(settings)

    assert error in exc_info.value.message
    assert isinstance(exc_info.value, VerikitValueError)
    assert isinstance(exc_info.value, ValueError)

from typing import Any, List


class VerikitError(Exception):
    message: str

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class VerikitValueError(VerikitError, ValueError):
    pass


class InvalidImageSettings(VerikitValueError):
    def __init__(self, errors: List[str]) -> None:
        super().__init__(f"Invalid image settings - {', '.join(errors)}")


class InvalidDimensionsError(VerikitValueError):
    def __init__(self, width: Any, height: Any) -> None:
        super().__init__(message=f"Invalid requested dimensions: {width}x{height}, both must be positive integers")

from __future__ import annotations


class AppError(Exception):
    """Base error for payload decoding and encoding."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class DecodeError(AppError):
    """Wire value does not match any accepted shape for its field."""


class MissingFieldError(DecodeError):
    pass


class EncodeError(AppError):
    pass


class ValidationError(AppError):
    """A locally constructed entity breaks a construction rule."""

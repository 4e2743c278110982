"""Argument checks and output naming for the jpeg and png processor."""

from __future__ import annotations

DEFAULT_QUALITY = 75
_IMAGE_SUFFIXES = (".jpg", ".jpeg", ".png")


class ImageArgError(ValueError):
    """The image file argument was missing or of an unsupported type."""


def validate_jp_proc_flags(file: str) -> None:
    """Raise :class:`ImageArgError` unless ``file`` names a jpeg or png file."""
    if not file.strip():
        raise ImageArgError("file cannot be empty")
    if not file.endswith(_IMAGE_SUFFIXES):
        raise ImageArgError("file must be a jpeg or png file")


def output_path(file: str, overwrite: bool) -> str:
    """Return where processed data goes: the file itself, or a ``.test`` sibling."""
    if overwrite:
        return file
    *stem, ext = file.split(".")
    return ".".join([*stem, "test", ext])
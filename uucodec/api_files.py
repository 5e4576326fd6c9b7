"""File-oriented convenience wrappers."""

from .main import uucodec


def encode_path(
    path: str,
    name: str | None = None,
    mode: int | None = None,
    output: str | None = None,
):
    return uucodec.encode_path(
        path,
        name=name,
        mode=mode,
        output=output,
    )


def decode_path(
    path: str,
    output: str | None = None,
    apply_mode: bool = True,
):
    return uucodec.decode_path(
        path,
        output=output,
        apply_mode=apply_mode,
    )


__all__ = [
    "decode_path",
    "encode_path",
]

"""Block and line codec convenience wrappers."""

from .main import uucodec


def encode_block(block):
    return uucodec.encode_block(block)


def decode_block(encoded):
    return uucodec.decode_block(encoded)


def encode_line(payload):
    return uucodec.encode_line(payload)


def decode_line(reader):
    return uucodec.decode_line(reader)


def encode_file(file_name: str, mode: int | None = None, data=b""):
    return uucodec.encode_file(file_name, mode, data)


def iter_file_lines(file_name: str, mode: int | None = None, data=b""):
    return uucodec.iter_file_lines(file_name, mode, data)


def write_file(writer, file_name: str, mode: int | None = None, data=b""):
    return uucodec.write_file(writer, file_name, mode, data)


def decode_file(source):
    return uucodec.decode_file(source)


__all__ = [
    "decode_block",
    "decode_file",
    "decode_line",
    "encode_block",
    "encode_file",
    "encode_line",
    "iter_file_lines",
    "write_file",
]

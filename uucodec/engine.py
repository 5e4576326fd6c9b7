# UUCODEC ENCODING ENGINE ->

import os as _os_module
import re as _re_module
import typing as _typing_module
import warnings as _warnings_module


class UUError(ValueError):
    """Base class for malformed or oversized uuencode data."""


class InputTooLarge(UUError):
    """A chunk longer than 45 bytes was offered to the line encoder."""


class IllegalCharacter(UUError):
    """A character outside the uuencode alphabet was met while decoding."""

    def __init__(self, char: int, position: "_typing_module.Optional[int]" = None, reason: str = "") -> None:
        self.char = char
        self.position = position
        where = f" at offset {position}" if position is not None else ""
        detail = f" ({reason})" if reason else ""
        super().__init__(f"Illegal uuencode character 0x{char:02X}{where}{detail}")


class EndOfStream(UUError, EOFError):
    """Fewer encoded characters were available than the line declares."""


class UUFile(_typing_module.NamedTuple):
    name: str
    mode: int
    data: bytes


class uucodec:
    import io
    import pathlib
    import stat
    import sys
    import typing
    import numpy as np
    re = _re_module

    @staticmethod
    def _env_int(name: str) -> "uucodec.typing.Optional[int]":
        value = _os_module.getenv(name)
        if not value:
            return None
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            return None
        if parsed <= 0:
            return None
        return parsed

    @staticmethod
    def _env_flag(name: str, default: bool) -> bool:
        raw = _os_module.getenv(name)
        if not raw:
            return default
        value = raw.strip().lower()
        if value in ("1", "true", "yes", "on"):
            return True
        if value in ("0", "false", "no", "off"):
            return False
        return default

    ENGINE_VERSION = "1.0.0"
    LINE_MAX_BYTES = 45
    DEFAULT_MODE = 0o644
    TERMINATOR = "`"
    END_LINE = "end"
    _ALPHABET_BASE = 0x20
    _INVALID = 255
    _FORBIDDEN_NAME_CHARS = "\\/\r\n"
    # Value 0 is written as a backtick instead of a space
    _ENCODE_TABLE: typing.ClassVar[str] = "`" + "".join(chr(0x21 + value) for value in range(63))
    _ENCODE_LUT: typing.ClassVar[bytes] = _ENCODE_TABLE.encode("ascii")
    # Maps ASCII byte -> 6-bit value (255 = invalid); space and backtick both mean 0
    _DECODE_LUT: typing.ClassVar[bytes] = bytes(
        [255] * 0x20 + list(range(64)) + [0] + [255] * 0x9F
    )
    _HEADER_PATTERN = _re_module.compile(r"^begin ([0-7]+) (.+)$")

    _FAST_THRESHOLD = _env_int("UUCODEC_FAST_THRESHOLD") or 4096  # Use NumPy for data >= this size
    _FAST_ENABLED = _env_flag("UUCODEC_FAST", True)
    MAX_INPUT_BYTES = _env_int("UUCODEC_MAX_BYTES")

    @staticmethod
    def _coerce_bytes(data: "uucodec.typing.Union[str, bytes, bytearray, memoryview]") -> bytes:
        if isinstance(data, str):
            return data.encode("utf-8")
        if isinstance(data, memoryview):
            return data.tobytes()
        if isinstance(data, (bytes, bytearray)):
            return bytes(data)
        raise TypeError("uucodec expects bytes-like or str input")

    @staticmethod
    def _code_points(chunk: "uucodec.typing.Union[str, bytes, bytearray]") -> "list[int]":
        if isinstance(chunk, str):
            return [ord(char) for char in chunk]
        return list(bytes(chunk))

    # BLOCK CODEC

    @classmethod
    def _encode_group(cls, group: int) -> str:
        table = cls._ENCODE_TABLE
        return (
            table[(group >> 18) & 0x3F]
            + table[(group >> 12) & 0x3F]
            + table[(group >> 6) & 0x3F]
            + table[group & 0x3F]
        )

    @classmethod
    def _decode_char(cls, char: int, position: "uucodec.typing.Optional[int]" = None) -> int:
        value = cls._DECODE_LUT[char] if 0 <= char < 256 else cls._INVALID
        if value == cls._INVALID:
            raise IllegalCharacter(char, position)
        return value

    @classmethod
    def _decode_group(cls, points: "list[int]", offset: int, base: int = 0) -> bytes:
        group = 0
        for index in range(offset, offset + 4):
            group = (group << 6) | cls._decode_char(points[index], base + index)
        return group.to_bytes(3, "big")

    @classmethod
    def encode_block(cls, block: "uucodec.typing.Union[bytes, bytearray, memoryview]") -> str:
        raw = cls._coerce_bytes(block)
        if len(raw) != 3:
            raise ValueError(f"uuencode blocks are exactly 3 bytes, got {len(raw)}")
        return cls._encode_group(int.from_bytes(raw, "big"))

    @classmethod
    def decode_block(cls, encoded: "uucodec.typing.Union[str, bytes, bytearray]") -> bytes:
        points = cls._code_points(encoded)
        if len(points) != 4:
            raise ValueError(f"uuencoded blocks are exactly 4 characters, got {len(points)}")
        return cls._decode_group(points, 0)

    # LINE CODEC

    @classmethod
    def encode_line(cls, payload: "uucodec.typing.Union[str, bytes, bytearray, memoryview]") -> str:
        """
        Encode up to 45 bytes as one uuencoded line, without the line break.

        An empty payload yields the bare backtick terminator line.
        """
        raw = cls._coerce_bytes(payload)
        if not raw:
            return cls.TERMINATOR
        if len(raw) > cls.LINE_MAX_BYTES:
            raise InputTooLarge(
                f"uuencode lines hold at most {cls.LINE_MAX_BYTES} bytes, got {len(raw)}"
            )
        parts = [chr(cls._ALPHABET_BASE + len(raw))]
        for offset in range(0, len(raw), 3):
            block = raw[offset:offset + 3].ljust(3, b"\x00")
            parts.append(cls._encode_group(int.from_bytes(block, "big")))
        return "".join(parts)

    @classmethod
    def decode_line(cls, reader) -> bytes:
        """
        Decode one uuencoded line from ``reader``.

        ``reader`` is any object with ``read(n)`` returning ``bytes`` or ``str``.
        Exactly the length character and its encoded groups are consumed; a
        following line break (or anything else) is left in the reader.
        """
        head = reader.read(1)
        if not head:
            raise EndOfStream("uuencoded line is missing its length character")
        prefix = cls._code_points(head)[0]
        length = cls._decode_char(prefix, 0)
        if length > cls.LINE_MAX_BYTES:
            raise IllegalCharacter(prefix, 0, f"declares {length} bytes, limit is {cls.LINE_MAX_BYTES}")
        if length == 0:
            return b""

        needed = ((length + 2) // 3) * 4
        points: "list[int]" = []
        # Unbuffered readers may return short reads before EOF
        while len(points) < needed:
            body = reader.read(needed - len(points))
            if not body:
                break
            points.extend(cls._code_points(body))
        if len(points) < needed:
            raise EndOfStream(
                f"uuencoded line truncated: expected {needed} characters, got {len(points)}"
            )
        out = bytearray()
        for offset in range(0, needed, 4):
            out += cls._decode_group(points, offset, base=1)
        return bytes(out[:length])

    # ENVELOPE WRITER

    @classmethod
    def _check_file_name(cls, file_name: str) -> None:
        if not isinstance(file_name, str):
            raise TypeError("file name must be a str")
        if not file_name:
            raise ValueError("file name must not be empty")
        if any(char in cls._FORBIDDEN_NAME_CHARS for char in file_name):
            raise ValueError("file name must not contain CR, LF or path separators")

    @classmethod
    def _resolve_mode(cls, mode: "uucodec.typing.Optional[int]") -> int:
        if mode is None:
            return cls.DEFAULT_MODE
        if isinstance(mode, bool) or not isinstance(mode, int):
            raise TypeError("mode must be an int")
        if mode < 0:
            raise ValueError("mode must not be negative")
        return mode

    @classmethod
    def _encode_chunk(cls, chunk: bytes) -> str:
        try:
            return cls.encode_line(chunk)
        except InputTooLarge as exc:
            raise RuntimeError("envelope chunking produced an oversized line") from exc

    @classmethod
    def _fast_encode_lines(cls, raw: bytes) -> "list[str]":
        """NumPy-accelerated encoding of every full 45-byte line."""
        np = cls.np
        line_bytes = cls.LINE_MAX_BYTES
        rows = len(raw) // line_bytes
        full = rows * line_bytes
        lines: "list[str]" = []
        if rows:
            arr = np.frombuffer(raw, dtype=np.uint8, count=full)
            groups = arr.reshape(rows, line_bytes // 3, 3)

            # Split each 24-bit group into 4 x 6-bit values
            out = np.empty((rows, line_bytes // 3, 4), dtype=np.uint8)
            out[..., 0] = groups[..., 0] >> 2
            out[..., 1] = ((groups[..., 0] & 0x03) << 4) | (groups[..., 1] >> 4)
            out[..., 2] = ((groups[..., 1] & 0x0F) << 2) | (groups[..., 2] >> 6)
            out[..., 3] = groups[..., 2] & 0x3F

            lut = np.frombuffer(cls._ENCODE_LUT, dtype=np.uint8)
            width = 1 + (line_bytes // 3) * 4
            text = np.empty((rows, width), dtype=np.uint8)
            text[:, 0] = cls._ALPHABET_BASE + line_bytes
            text[:, 1:] = lut[out.reshape(rows, width - 1)]

            blob = text.tobytes().decode("ascii")
            lines.extend(blob[row * width:(row + 1) * width] for row in range(rows))
        if full < len(raw):
            lines.append(cls._encode_chunk(raw[full:]))
        return lines

    @classmethod
    def _encode_body(cls, raw: bytes) -> "uucodec.typing.Iterator[str]":
        if cls._FAST_ENABLED and len(raw) >= cls._FAST_THRESHOLD:
            yield from cls._fast_encode_lines(raw)
            return
        for offset in range(0, len(raw), cls.LINE_MAX_BYTES):
            yield cls._encode_chunk(raw[offset:offset + cls.LINE_MAX_BYTES])

    @classmethod
    def _envelope_lines(cls, file_name: str, mode: int, raw: bytes) -> "uucodec.typing.Iterator[str]":
        yield f"begin {mode:o} {file_name}"
        yield from cls._encode_body(raw)
        yield cls.TERMINATOR
        yield cls.END_LINE

    @classmethod
    def iter_file_lines(
        cls,
        file_name: str,
        mode: "uucodec.typing.Optional[int]" = None,
        data: "uucodec.typing.Union[str, bytes, bytearray, memoryview]" = b"",
    ) -> "uucodec.typing.Iterator[str]":
        """
        Yield the lines of a uuencoded envelope, without line breaks.

        Arguments are validated eagerly, before the first line is produced.
        """
        cls._check_file_name(file_name)
        real_mode = cls._resolve_mode(mode)
        raw = cls._coerce_bytes(data)
        return cls._envelope_lines(file_name, real_mode, raw)

    @classmethod
    def encode_file(
        cls,
        file_name: str,
        mode: "uucodec.typing.Optional[int]" = None,
        data: "uucodec.typing.Union[str, bytes, bytearray, memoryview]" = b"",
    ) -> str:
        return "".join(f"{line}\n" for line in cls.iter_file_lines(file_name, mode, data))

    @classmethod
    def write_file(
        cls,
        writer,
        file_name: str,
        mode: "uucodec.typing.Optional[int]" = None,
        data: "uucodec.typing.Union[str, bytes, bytearray, memoryview]" = b"",
    ) -> None:
        for line in cls.iter_file_lines(file_name, mode, data):
            writer.write(f"{line}\n")

    # ENVELOPE READER

    @classmethod
    def _open_text(cls, source) -> "tuple[uucodec.typing.TextIO, bool]":
        """Return a text stream over ``source`` and whether it came from raw bytes."""
        if isinstance(source, str):
            return cls.io.StringIO(source), False
        if isinstance(source, (bytes, bytearray, memoryview)):
            # latin-1 keeps every byte value as the same code point
            return cls.io.StringIO(bytes(source).decode("latin-1")), True
        content = source.read()
        if isinstance(content, str):
            return cls.io.StringIO(content), False
        return cls.io.StringIO(content.decode("latin-1")), True

    @classmethod
    def _read_header(cls, stream, raw_names: bool = False) -> "tuple[int, str]":
        for line in stream:
            match = cls._HEADER_PATTERN.match(line.rstrip("\r\n"))
            if match:
                break
        else:
            raise ValueError("No uuencode 'begin' header found")
        mode = int(match.group(1), 8)
        name = match.group(2)
        if raw_names:
            # Names were read byte-for-byte; restore the UTF-8 spelling
            name = name.encode("latin-1").decode("utf-8", "surrogateescape")
        if "/" in name or "\\" in name or name in (".", ".."):
            raise ValueError(f"Refusing header file name with path separators: {name!r}")
        return mode, name

    @classmethod
    def decode_file(cls, source) -> UUFile:
        """
        Decode a ``begin``/``end`` envelope from a string, bytes or stream.

        Text before the header is skipped. Each body line must end right after
        its encoded data (an optional CR is allowed). A missing ``end`` trailer
        only warns; a body cut off before the terminator line raises.
        """
        stream, raw_names = cls._open_text(source)
        mode, name = cls._read_header(stream, raw_names)

        chunks = []
        body_line = 0
        while True:
            line = stream.readline()
            body_line += 1
            if not line:
                raise EndOfStream(f"uuencoded body of '{name}' ended before the terminator line")
            body = line[:-1] if line.endswith("\n") else line
            if body.endswith("\r"):
                body = body[:-1]
            reader = cls.io.StringIO(body)
            chunk = cls.decode_line(reader)
            rest = reader.read()
            if rest:
                raise IllegalCharacter(
                    ord(rest[0]), len(body) - len(rest), f"trailing data on body line {body_line}"
                )
            if not chunk:
                break
            chunks.append(chunk)

        trailer = stream.readline()
        if trailer.rstrip("\r\n") != cls.END_LINE:
            _warnings_module.warn(
                f"missing end; '{name}' may be truncated", RuntimeWarning, stacklevel=2
            )
        return UUFile(name, mode, b"".join(chunks))

    # FILE HELPERS

    @staticmethod
    def _human_readable_size(num_bytes: int) -> str:
        units = ["B", "KiB", "MiB"]
        value = float(num_bytes)
        for unit in units:
            if value < 1024.0:
                return f"{value:.2f} {unit}"
            value /= 1024.0
        return f"{value:.2f} GiB"

    @staticmethod
    def _normalize_path(path_like: "uucodec.typing.Union[str, uucodec.pathlib.Path]") -> "uucodec.pathlib.Path":
        if isinstance(path_like, uucodec.pathlib.Path):
            path = path_like
        else:
            path = uucodec.pathlib.Path(str(path_like))
        path = path.expanduser()
        try:
            return path.resolve(strict=False)
        except OSError:
            return path

    @staticmethod
    def _ensure_existing_file(path: "uucodec.pathlib.Path") -> None:
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")

    @staticmethod
    def _ensure_size_limit(path: "uucodec.pathlib.Path", max_bytes: "uucodec.typing.Optional[int]" = None) -> None:
        limit = max_bytes or uucodec.MAX_INPUT_BYTES
        if not limit:
            return
        size = path.stat().st_size
        if size > limit:
            human_size = uucodec._human_readable_size(size)
            human_limit = uucodec._human_readable_size(limit)
            raise ValueError(f"{path.name} is {human_size}, exceeding the {human_limit} limit")

    @classmethod
    def encode_path(
        cls,
        path: "uucodec.typing.Union[str, uucodec.pathlib.Path]",
        name: "uucodec.typing.Optional[str]" = None,
        mode: "uucodec.typing.Optional[int]" = None,
        output: "uucodec.typing.Optional[str]" = None,
    ) -> str:
        src = cls._normalize_path(path)
        cls._ensure_existing_file(src)
        cls._ensure_size_limit(src)
        header_name = name if name is not None else src.name
        if mode is None:
            mode = cls.stat.S_IMODE(src.stat().st_mode)
        envelope = cls.encode_file(header_name, mode, src.read_bytes())
        # Header names are written as UTF-8; undecodable OS names keep their raw bytes
        blob = envelope.encode("utf-8", "surrogateescape")
        out_path = cls._normalize_path(output) if output else src.with_name(src.name + ".uu")
        out_path.write_bytes(blob)
        return str(out_path)

    @classmethod
    def decode_path(
        cls,
        path: "uucodec.typing.Union[str, uucodec.pathlib.Path]",
        output: "uucodec.typing.Optional[str]" = None,
        apply_mode: bool = True,
    ) -> str:
        src = cls._normalize_path(path)
        cls._ensure_existing_file(src)
        decoded = cls.decode_file(src.read_bytes())
        out_path = cls._normalize_path(output) if output else src.with_name(decoded.name)
        out_path.write_bytes(decoded.data)
        if apply_mode:
            # Only rwx bits; setuid/setgid/sticky from a header are never applied
            permissions = cls.stat.S_IRWXU | cls.stat.S_IRWXG | cls.stat.S_IRWXO
            _os_module.chmod(out_path, decoded.mode & permissions)
        return str(out_path)


def cli(argv=None) -> int:
    import argparse

    def _cli_plain_mode() -> bool:
        if _os_module.getenv("UUCODEC_CLI_PLAIN"):
            return True
        if _os_module.getenv("NO_COLOR"):
            return True
        style = (_os_module.getenv("UUCODEC_CLI_STYLE") or "").strip().lower()
        return style in {"plain", "boring", "0", "false", "off"}

    class _CliTheme:
        def __init__(self, plain: bool):
            self.plain = plain
            self.reset = "" if plain else "\033[0m"
            self.bold = "" if plain else "\033[1m"
            self.red = "" if plain else "\033[31m"
            self.green = "" if plain else "\033[32m"

        def _wrap(self, msg: str, color: str, emoji: "str | None" = None) -> str:
            if self.plain:
                return msg
            prefix = f"{emoji} " if emoji else ""
            return f"{self.bold}{color}{prefix}{msg}{self.reset}"

        def ok(self, msg: str) -> str:
            return self._wrap(msg, self.green, "✅")

        def err(self, msg: str) -> str:
            return self._wrap(msg, self.red, "❌")

    theme = _CliTheme(_cli_plain_mode())

    def _octal_mode(value: str) -> int:
        try:
            return int(value, 8)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid octal mode: {value!r}")

    parser = argparse.ArgumentParser(prog="uucodec", description="uuencode/uudecode toolkit")
    subparsers = parser.add_subparsers(dest="command", required=True)

    enc = subparsers.add_parser("encode", help="Wrap a file in a uuencoded begin/end envelope")
    enc.add_argument("input", help="Input file path")
    enc.add_argument("-n", "--name", default=None, help="Name written to the header (default: input basename)")
    enc.add_argument(
        "-m", "--mode",
        type=_octal_mode,
        default=None,
        help="Octal permission mode for the header (default: the input file's mode)"
    )
    enc.add_argument("-o", "--output", default=None, help="Output path (default: INPUT.uu)")

    dec = subparsers.add_parser("decode", help="Decode a uuencoded envelope back to a file")
    dec.add_argument("input", help="uuencoded input path")
    dec.add_argument("-o", "--output", default=None, help="Output path (default: name from the header)")
    dec.add_argument(
        "--no-mode",
        dest="apply_mode",
        action="store_false",
        help="Do not apply the header's permission mode to the output"
    )

    line_enc = subparsers.add_parser("line-enc", help="Encode text (max 45 bytes) as a single line")
    line_enc.add_argument("text", help="Text to encode")

    line_dec = subparsers.add_parser("line-dec", help="Decode a single uuencoded line")
    line_dec.add_argument("line", help="Encoded line")

    args = parser.parse_args(argv)

    if args.command == "line-enc":
        try:
            print(uucodec.encode_line(args.text))
            return 0
        except UUError as exc:
            print(theme.err(f"line encode failed: {exc}"))
            return 1

    if args.command == "line-dec":
        try:
            decoded = uucodec.decode_line(uucodec.io.StringIO(args.line))
            print(decoded.decode("utf-8", errors="replace"))
            return 0
        except UUError as exc:
            print(theme.err(f"line decode failed: {exc}"))
            return 1

    if args.command == "encode":
        try:
            out_path = uucodec.encode_path(args.input, name=args.name, mode=args.mode, output=args.output)
            print(theme.ok(f"Wrote {out_path}"))
            return 0
        except (OSError, ValueError, TypeError) as exc:
            print(theme.err(f"encode failed: {exc}"))
            return 1

    if args.command == "decode":
        try:
            with _warnings_module.catch_warnings(record=True) as caught:
                _warnings_module.simplefilter("always", RuntimeWarning)
                out_path = uucodec.decode_path(args.input, output=args.output, apply_mode=args.apply_mode)
            for warning in caught:
                print(f"uucodec: {warning.message}", file=uucodec.sys.stderr)
            print(theme.ok(f"Wrote {out_path}"))
            return 0
        except (OSError, ValueError) as exc:
            print(theme.err(f"decode failed: {exc}"))
            return 1

    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())

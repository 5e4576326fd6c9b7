"""Entry module exposing the engine namespace and the command-line front end.

The codec lives in `engine.py`; `python -m uucodec.main` runs the CLI.
"""

from .engine import (
    EndOfStream,
    IllegalCharacter,
    InputTooLarge,
    UUError,
    UUFile,
    cli,
    main,
    uucodec,
)

__all__ = [
    "EndOfStream",
    "IllegalCharacter",
    "InputTooLarge",
    "UUError",
    "UUFile",
    "cli",
    "main",
    "uucodec",
]


if __name__ == "__main__":
    raise SystemExit(main())

"""
UUCODEC - classical uuencode for Python

Block, line and envelope codecs for the historical uuencode format: 3 raw
bytes become 4 characters from the 0x20-0x5F alphabet (backtick standing in
for zero), lines carry at most 45 bytes behind a length character, and files
are wrapped in ``begin <mode> <name>`` / ``end`` markers.
"""

from .main import *
from .api_strings import (
    decode_block,
    decode_file,
    decode_line,
    encode_block,
    encode_file,
    encode_line,
    iter_file_lines,
    write_file,
)
from .api_files import decode_path, encode_path
from .version import __version__

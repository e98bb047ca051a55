# markov_textgen/core/codec.py
"""
Binary persistence format for a TransitionTable.

Layout (integers big-endian):

    magic    4 bytes   b"MKVT"
    version  1 byte    FORMAT_VERSION
    length   4 bytes   payload size in bytes
    crc32    4 bytes   zlib.crc32 of the payload
    payload  length    UTF-8 JSON: [[key, [successor, ...]], ...]

Keys are written sorted so equal tables encode to equal bytes. Successor
lists are written as stored: order and duplicates are preserved. decode()
either returns a complete table or raises DecodeError.
"""

from __future__ import annotations

from typing import Any, Dict, List
import json
import logging
import struct
import zlib

from .errors import DecodeError, UnsupportedVersionError
from .transition_table import TransitionTable

logger = logging.getLogger(__name__)

MAGIC = b"MKVT"
FORMAT_VERSION = 1
_HEADER = struct.Struct(">4sBII")
HEADER_SIZE = _HEADER.size


# ------------------------------------------------------------------
# Encoding
# ------------------------------------------------------------------
def encode(table: TransitionTable) -> bytes:
    pairs = [[key, list(table.successors(key))] for key in sorted(table.keys())]
    payload = json.dumps(pairs, separators=(",", ":")).encode("utf-8")
    header = _HEADER.pack(MAGIC, FORMAT_VERSION, len(payload), zlib.crc32(payload) & 0xFFFFFFFF)
    return header + payload


# ------------------------------------------------------------------
# Decoding
# ------------------------------------------------------------------
def decode(data: bytes) -> TransitionTable:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise DecodeError(f"expected bytes, got {type(data).__name__}")
    data = bytes(data)
    if len(data) < HEADER_SIZE:
        raise DecodeError(f"truncated header: {len(data)} bytes, need {HEADER_SIZE}")

    magic, version, size, crc = _HEADER.unpack_from(data)
    if magic != MAGIC:
        raise DecodeError(f"bad magic {magic!r}; not a model file")
    if version != FORMAT_VERSION:
        raise UnsupportedVersionError(version, FORMAT_VERSION)

    payload = data[HEADER_SIZE:]
    if len(payload) != size:
        raise DecodeError(f"payload length mismatch: header says {size}, found {len(payload)}")
    if zlib.crc32(payload) & 0xFFFFFFFF != crc:
        raise DecodeError("payload checksum mismatch")

    try:
        raw = json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, RecursionError) as e:
        raise DecodeError(f"payload is not valid UTF-8 JSON: {e}") from e

    table = TransitionTable.from_dict(_validate_pairs(raw))
    logger.debug("decoded table with %d keys", len(table))
    return table


def _validate_pairs(raw: Any) -> Dict[str, List[str]]:
    if not isinstance(raw, list):
        raise DecodeError("payload must be a JSON array of [key, successors] pairs")
    out: Dict[str, List[str]] = {}
    for i, pair in enumerate(raw):
        if not (isinstance(pair, list) and len(pair) == 2):
            raise DecodeError(f"entry {i} is not a [key, successors] pair")
        key, succ = pair
        if not isinstance(key, str):
            raise DecodeError(f"entry {i}: key must be a string")
        if not isinstance(succ, list) or not all(isinstance(s, str) for s in succ):
            raise DecodeError(f"entry {i}: successors must be a list of strings")
        if key in out:
            raise DecodeError(f"entry {i}: duplicate key {key!r}")
        out[key] = succ
    return out

"""A single PNG chunk.

On disk a chunk is::

    [4B length, big endian][4B type][length bytes of data][4B CRC, big endian]

The length counts only the data. The CRC is CRC-32 (ISO-3309, as in
zlib) over the type bytes followed by the data.
"""
import struct
import zlib

from chunk_type import ChunkType
from png_errors import (
    ChunkTooLargeError,
    CrcMismatchError,
    InvalidEncodingError,
    LengthMismatchError,
    UnexpectedEofError,
)

MAX_CHUNK_LENGTH = 2**32 - 1


def compute_crc(type_bytes, data):
    return zlib.crc32(data, zlib.crc32(type_bytes))


def _take(buffer, offset, size, what):
    available = len(buffer) - offset
    if available < size:
        raise UnexpectedEofError(what, size, max(available, 0), offset)
    return bytes(buffer[offset : offset + size])


class ChunkModel:
    __slots__ = ("_length", "_chunk_type", "_data", "_crc")

    def __init__(self, chunk_type, data):
        data = bytes(data)
        if len(data) > MAX_CHUNK_LENGTH:
            raise ChunkTooLargeError(len(data))
        self._chunk_type = chunk_type
        self._data = data
        self._length = len(data)
        self._crc = compute_crc(chunk_type.to_bytes(), data)

    @classmethod
    def parse(cls, buffer):
        # Bytes after the CRC are ignored
        chunk, _ = cls.read_from(buffer)
        return chunk

    @classmethod
    def read_from(cls, buffer, offset=0):
        # Returns (chunk, offset right after its CRC)
        (length,) = struct.unpack(">I", _take(buffer, offset, 4, "chunk length"))
        chunk_type = ChunkType.from_bytes(_take(buffer, offset + 4, 4, "chunk type"))
        data = _take(buffer, offset + 8, length, f"{chunk_type} data")
        # Stored CRC covers type + data
        (crc,) = struct.unpack(
            ">I", _take(buffer, offset + 8 + length, 4, f"{chunk_type} crc")
        )

        # Recompute length and CRC and compare with the stored ones
        chunk = cls(chunk_type, data)
        if chunk.length != length:
            raise LengthMismatchError(length, chunk.length)
        if chunk.crc != crc:
            raise CrcMismatchError(str(chunk_type), crc, chunk.crc)
        return chunk, offset + 12 + length

    @property
    def length(self):
        return self._length

    @property
    def chunk_type(self):
        return self._chunk_type

    @property
    def data(self):
        return self._data

    @property
    def crc(self):
        return self._crc

    def data_as_text(self):
        try:
            return self._data.decode("utf-8")
        except UnicodeDecodeError as err:
            raise InvalidEncodingError(
                f"{self._chunk_type} chunk data is not valid UTF-8: {err.reason} "
                f"at byte {err.start}"
            ) from err

    def serialize(self):
        return (
            struct.pack(">I", self._length)
            + self._chunk_type.to_bytes()
            + self._data
            + struct.pack(">I", self._crc)
        )

    def write_to_file(self, file):
        file.write(self.serialize())

    def summary(self):
        return f"Type:{self._chunk_type}    Length:{self._length}"

    def __eq__(self, other):
        if not isinstance(other, ChunkModel):
            return NotImplemented
        return (
            self._chunk_type == other._chunk_type
            and self._data == other._data
            and self._crc == other._crc
        )

    def __str__(self):
        return (
            "Chunk {\n"
            f"  Length: {self._length}\n"
            f"  Type: {self._chunk_type}\n"
            f"  Data: {len(self._data)} bytes\n"
            f"  Crc: {self._crc}\n"
            "}"
        )

    def __repr__(self):
        return f"ChunkModel({self._chunk_type!r}, length={self._length})"

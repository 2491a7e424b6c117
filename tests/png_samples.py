import struct
import zlib

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def raw_chunk(type_bytes, data):
    return (
        struct.pack(">I", len(data))
        + type_bytes
        + data
        + zlib.crc32(type_bytes + data).to_bytes(4, "big")
    )


def minimal_png_bytes():
    # 1x1 RGB, 8 bit
    ihdr_data = struct.pack(">IIBBBBB", 1, 1, 8, 2, 0, 0, 0)
    idat_data = zlib.compress(b"\x00\x00\x00\x00")
    return (
        PNG_SIGNATURE
        + raw_chunk(b"IHDR", ihdr_data)
        + raw_chunk(b"IDAT", idat_data)
        + raw_chunk(b"IEND", b"")
    )

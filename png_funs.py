import os

import chardet
import numpy as np

from chunk_model import ChunkModel
from chunk_type import ChunkType
from png_errors import ChunkNotFoundError, InvalidEncodingError, InvalidTypeCodeError
from png_model import PngModel

HEX_DUMP_WIDTH = 16


def read_png(image):
    with open(image, "rb") as file:
        return PngModel.parse(file.read())


def write_png(png, image):
    # Rewriting in place must drop the old tail when the new file is shorter.
    if os.path.exists(image):
        with open(image, "r+b") as file:
            png.write_to_file(file)
            file.truncate()
    else:
        with open(image, "wb") as file:
            png.write_to_file(file)


def new_chunk_type(name):
    # from_string lets through a lowercase third letter, but the parser would
    # refuse to read such a chunk back
    chunk_type = ChunkType.from_string(name)
    if not chunk_type.is_valid():
        raise InvalidTypeCodeError(
            name, f"Chunk type {name!r} has the reserved bit set (third letter lowercase)"
        )
    return chunk_type


def guess_encoding(data):
    return chardet.detect(data)["encoding"]


def encode_message(image, chunk_type, message, output=None):
    png = read_png(image)
    chunk = ChunkModel(new_chunk_type(chunk_type), message.encode("utf-8"))
    png.append_chunk(chunk)

    target = output if output is not None else image
    write_png(png, target)
    print(f"Message written to {target} in {chunk_type} chunk")
    return chunk


def decode_message(image, chunk_type):
    # chunk_by_type hides a malformed type string, report it instead
    ChunkType.from_string(chunk_type)
    png = read_png(image)
    chunk = png.chunk_by_type(chunk_type)
    if chunk is None:
        raise ChunkNotFoundError(chunk_type)

    try:
        return chunk.data_as_text()
    except InvalidEncodingError as err:
        detected_encoding = guess_encoding(chunk.data)
        if detected_encoding is None:
            raise
        raise InvalidEncodingError(
            f"{err} (data looks like {detected_encoding})"
        ) from err


def remove_message(image, chunk_type):
    png = read_png(image)
    chunk = png.remove_chunk(chunk_type)
    write_png(png, image)
    print(f"Removed {chunk_type} chunk from {image}")
    return chunk


def hex_dump(data, width=HEX_DUMP_WIDTH):
    raw = np.frombuffer(data, dtype=np.uint8)
    num_rows = int(np.ceil(len(raw) / width))

    # Pad the last row so the bytes fit a rows x width grid
    grid = np.zeros(num_rows * width, dtype=np.uint8)
    grid[: len(raw)] = raw
    grid = grid.reshape(num_rows, width)
    printable = np.where((grid >= 32) & (grid < 127), grid, ord("."))

    lines = []
    for row in range(num_rows):
        count = min(width, len(raw) - row * width)
        hex_part = " ".join(f"{byte:02x}" for byte in grid[row, :count])
        text_part = printable[row, :count].astype(np.uint8).tobytes().decode("ascii")
        lines.append(f"{row * width:08x}  {hex_part:<{width * 3 - 1}}  {text_part}")
    return "\n".join(lines)


def print_png(image, raw=False):
    png = read_png(image)

    print(f"{image}: {len(png)} chunks")
    for chunk in png:
        kind = "CC" if chunk.chunk_type.is_critical() else "AC"
        print(f"{kind} {chunk.summary()}    Name:{chunk.chunk_type.name}")

    if raw:
        print(hex_dump(png.serialize()))
    return png

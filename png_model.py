"""A PNG file seen as its 8 byte signature followed by a list of chunks."""
from chunk_model import ChunkModel
from chunk_type import ChunkType
from png_errors import (
    BadSignatureError,
    ChunkNotFoundError,
    InvalidTypeCodeError,
    UnexpectedEofError,
)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


class PngModel:
    STANDARD_HEADER = PNG_SIGNATURE

    def __init__(self, chunks, signature=PNG_SIGNATURE):
        self._signature = bytes(signature)
        self._chunks = list(chunks)

    @classmethod
    def from_chunks(cls, chunks):
        # Nothing is checked, IHDR and IEND may sit anywhere or be missing
        return cls(chunks)

    @classmethod
    def parse(cls, buffer):
        # Check if the data starts with the PNG signature
        if len(buffer) < len(PNG_SIGNATURE):
            raise UnexpectedEofError("signature", len(PNG_SIGNATURE), len(buffer), 0)
        signature = bytes(buffer[: len(PNG_SIGNATURE)])
        if signature != PNG_SIGNATURE:
            raise BadSignatureError(signature)

        # Read chunks until the data runs out, the first bad one aborts
        chunks = []
        offset = len(PNG_SIGNATURE)
        while offset < len(buffer):
            chunk, offset = ChunkModel.read_from(buffer, offset)
            chunks.append(chunk)
        return cls(chunks, signature)

    @property
    def signature(self):
        return self._signature

    @property
    def chunks(self):
        return tuple(self._chunks)

    def critical_chunks(self):
        return [chunk for chunk in self._chunks if chunk.chunk_type.is_critical()]

    def append_chunk(self, chunk):
        # Goes in front of the last chunk, which is expected to be IEND.
        if self._chunks:
            self._chunks.insert(len(self._chunks) - 1, chunk)
        else:
            self._chunks.append(chunk)

    def remove_chunk(self, chunk_type):
        target = ChunkType.from_string(chunk_type)
        for index, chunk in enumerate(self._chunks):
            if chunk.chunk_type == target:
                return self._chunks.pop(index)
        raise ChunkNotFoundError(chunk_type)

    def chunk_by_type(self, chunk_type):
        # A malformed type string just finds nothing
        try:
            target = ChunkType.from_string(chunk_type)
        except InvalidTypeCodeError:
            return None
        for chunk in self._chunks:
            if chunk.chunk_type == target:
                return chunk
        return None

    def serialize(self):
        return self._signature + b"".join(chunk.serialize() for chunk in self._chunks)

    def write_to_file(self, file):
        file.write(self._signature)
        for chunk in self._chunks:
            chunk.write_to_file(file)

    def __len__(self):
        return len(self._chunks)

    def __iter__(self):
        return iter(self._chunks)

    def __str__(self):
        return str(list(self.serialize()))

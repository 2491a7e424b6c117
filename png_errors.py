class PngError(ValueError):
    """Base class for every structural PNG failure."""


class InvalidTypeCodeError(PngError):
    def __init__(self, code, message=None):
        self.code = code
        super().__init__(message or f"Not a valid chunk type: {code!r}")


class WrongLengthError(InvalidTypeCodeError):
    def __init__(self, code):
        super().__init__(
            code, f"Chunk type must be exactly 4 bytes, got {len(code)}: {code!r}"
        )


class InvalidCharacterError(InvalidTypeCodeError):
    def __init__(self, code, byte):
        self.byte = byte
        super().__init__(
            code, f"Chunk type {code!r} contains non alphabetic byte {byte}"
        )


class UnexpectedEofError(PngError):
    def __init__(self, what, needed, available, offset):
        self.needed = needed
        self.available = available
        self.offset = offset
        super().__init__(
            f"Unexpected end of data reading {what} at offset {offset}: "
            f"need {needed} bytes, {available} left"
        )


class LengthMismatchError(PngError):
    def __init__(self, declared, actual):
        self.declared = declared
        self.actual = actual
        super().__init__(
            f"Length does not match actual data size ({declared} != {actual})"
        )


class CrcMismatchError(PngError):
    def __init__(self, chunk_type, expected, actual):
        self.chunk_type = chunk_type
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"CRC check failed for {chunk_type} chunk: "
            f"stored {expected:08x}, computed {actual:08x}"
        )


class BadSignatureError(PngError):
    def __init__(self, signature):
        self.signature = signature
        super().__init__(f"Not a valid PNG file, bad signature {signature.hex()}")


class InvalidEncodingError(PngError):
    pass


class ChunkNotFoundError(PngError):
    def __init__(self, chunk_type):
        self.chunk_type = chunk_type
        super().__init__(f"No chunk of type {chunk_type} found")


class ChunkTooLargeError(PngError):
    def __init__(self, size):
        self.size = size
        super().__init__(f"Chunk data of {size} bytes does not fit a 32-bit length")

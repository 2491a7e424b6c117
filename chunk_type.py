"""PNG chunk type codes.

A chunk type is four ASCII letters. The case of each letter is a flag:

    byte 0  uppercase -> critical, lowercase -> ancillary
    byte 1  uppercase -> public, lowercase -> private
    byte 2  uppercase -> reserved bit valid (lowercase is reserved)
    byte 3  lowercase -> safe to copy

Two constructors exist and they do not promise the same thing.
``ChunkType.from_bytes`` only accepts codes that are valid per the PNG
spec (four letters AND an uppercase third letter), it is what the parser
uses. ``ChunkType.from_string`` only checks that the code is four ASCII
letters, so ``ChunkType.from_string("Rust")`` works even though
``is_valid()`` is False for it. Lookups by name go through
``from_string``.
"""
from png_errors import InvalidCharacterError, InvalidTypeCodeError, WrongLengthError

ASCII_LETTERS = frozenset(range(65, 91)) | frozenset(range(97, 123))

# CC - critical chunk | AC - ancillary chunk
chunk_types = {
    "49484452": "IHDR",  # CC
    "504c5445": "PLTE",  # CC
    "49444154": "IDAT",  # CC
    "49454e44": "IEND",  # CC
    "73524742": "sRGB",  # AC
    "67414d41": "gAMA",  # AC
    "70485973": "pHYs",  # AC
    "73424954": "sBIT",  # AC
    "73504c54": "sPLT",  # AC
    "74494d45": "tIME",  # AC
    "6348524d": "cHRM",  # AC
    "74455874": "tEXt",  # AC
    "7a545874": "zTXt",  # AC
    "69545874": "iTXt",  # AC
    "69434350": "iCCP",  # AC
    "624b4744": "bKGD",  # AC
    "68495354": "hIST",  # AC
    "74524e53": "tRNS",  # AC
}


def _is_upper(byte):
    return 65 <= byte <= 90


def _is_lower(byte):
    return 97 <= byte <= 122


class ChunkType:
    __slots__ = ("_code",)

    def __init__(self, code):
        # No checks here, use from_bytes / from_string.
        self._code = bytes(code)

    @classmethod
    def from_bytes(cls, code):
        # Four letters with an uppercase third letter, anything else is refused
        code = bytes(code)
        if len(code) != 4:
            raise InvalidTypeCodeError(code)
        chunk_type = cls(code)
        if not chunk_type.is_valid():
            raise InvalidTypeCodeError(code)
        return chunk_type

    @classmethod
    def from_string(cls, text):
        # Reserved bit is not checked, see the module docstring
        try:
            code = text.encode("utf-8")
        except UnicodeEncodeError as err:
            # Lone surrogates; \udc80-\udcff stand for undecodable argv bytes
            char = ord(text[err.start])
            byte = char - 0xDC00 if 0xDC80 <= char <= 0xDCFF else char
            raise InvalidCharacterError(text, byte) from err
        if len(code) != 4:
            raise WrongLengthError(text)
        for byte in code:
            if byte not in ASCII_LETTERS:
                raise InvalidCharacterError(text, byte)
        return cls(code)

    def to_bytes(self):
        return self._code

    def is_valid(self):
        if len(self._code) != 4:
            return False
        if not all(byte in ASCII_LETTERS for byte in self._code):
            return False
        return self.is_reserved_bit_valid()

    def is_critical(self):
        return _is_upper(self._code[0])

    def is_public(self):
        return _is_upper(self._code[1])

    def is_reserved_bit_valid(self):
        return _is_upper(self._code[2])

    def is_safe_to_copy(self):
        return _is_lower(self._code[3])

    @property
    def name(self):
        return chunk_types.get(self._code.hex(), "unknown")

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented
        return self._code == other._code

    def __hash__(self):
        return hash(self._code)

    def __str__(self):
        try:
            return self._code.decode("utf-8")
        except UnicodeDecodeError:
            return "Unknown"

    def __repr__(self):
        return f"ChunkType({self._code!r})"

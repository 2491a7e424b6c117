import pytest

from chunk_model import ChunkModel
from chunk_type import ChunkType
from tests.png_samples import PNG_SIGNATURE, raw_chunk
from png_errors import (
    BadSignatureError,
    ChunkNotFoundError,
    CrcMismatchError,
    InvalidTypeCodeError,
    UnexpectedEofError,
)
from png_model import PngModel


def chunk_from_strings(chunk_type, data):
    return ChunkModel(ChunkType.from_string(chunk_type), data.encode("utf-8"))


def sample_chunks():
    return [
        chunk_from_strings("FrSt", "I am the first chunk"),
        chunk_from_strings("miDl", "I am another chunk"),
        chunk_from_strings("LASt", "I am the last chunk"),
    ]


def sample_png():
    return PngModel.from_chunks(sample_chunks())


def types_of(png):
    return [str(chunk.chunk_type) for chunk in png.chunks]


def test_from_chunks():
    png = PngModel.from_chunks(sample_chunks())
    assert len(png.chunks) == 3
    assert png.signature == PngModel.STANDARD_HEADER


def test_from_chunks_does_not_check_order():
    png = PngModel.from_chunks([chunk_from_strings("IEND", ""), chunk_from_strings("IHDR", "")])
    assert types_of(png) == ["IEND", "IHDR"]


def test_parse(png_bytes):
    png = PngModel.parse(png_bytes)
    assert types_of(png) == ["IHDR", "IDAT", "IEND"]
    assert png.signature == PNG_SIGNATURE


def test_parse_signature_only():
    png = PngModel.parse(PNG_SIGNATURE)
    assert len(png) == 0


def test_parse_bad_signature():
    data = bytes([1, 2, 3, 4, 5, 6, 7, 8]) + b"".join(
        chunk.serialize() for chunk in sample_chunks()
    )
    with pytest.raises(BadSignatureError):
        PngModel.parse(data)


def test_parse_short_input():
    with pytest.raises(UnexpectedEofError):
        PngModel.parse(PNG_SIGNATURE[:5])


def test_parse_bad_chunk_aborts(png_bytes):
    corrupted = bytearray(png_bytes)
    corrupted[-1] ^= 0xFF
    with pytest.raises(CrcMismatchError):
        PngModel.parse(bytes(corrupted))


def test_parse_invalid_type_code():
    data = PNG_SIGNATURE + raw_chunk(b"Rust", b"data")
    with pytest.raises(InvalidTypeCodeError):
        PngModel.parse(data)


def test_parse_truncated_chunk(png_bytes):
    with pytest.raises(UnexpectedEofError):
        PngModel.parse(png_bytes[:-2])


def test_parse_does_not_require_ihdr_or_iend():
    data = PNG_SIGNATURE + raw_chunk(b"ruSt", b"hello")
    png = PngModel.parse(data)
    assert types_of(png) == ["ruSt"]


def test_round_trip(png_bytes):
    png = PngModel.parse(png_bytes)
    assert png.serialize() == png_bytes
    again = PngModel.parse(png.serialize())
    assert again.signature == png.signature
    assert list(again.chunks) == list(png.chunks)


def test_round_trip_from_chunks():
    png = sample_png()
    assert list(PngModel.parse(png.serialize()).chunks) == sample_chunks()


def test_append_chunk_goes_before_last():
    png = sample_png()
    png.append_chunk(chunk_from_strings("TeSt", "Message"))
    assert types_of(png) == ["FrSt", "miDl", "TeSt", "LASt"]


def test_append_chunk_to_empty_png():
    png = PngModel.from_chunks([])
    png.append_chunk(chunk_from_strings("TeSt", "Message"))
    assert types_of(png) == ["TeSt"]


def test_remove_chunk():
    png = sample_png()
    removed = png.remove_chunk("miDl")
    assert removed.data_as_text() == "I am another chunk"
    assert types_of(png) == ["FrSt", "LASt"]


def test_remove_chunk_removes_first_match():
    png = sample_png()
    png.append_chunk(chunk_from_strings("miDl", "second"))
    removed = png.remove_chunk("miDl")
    assert removed.data_as_text() == "I am another chunk"
    assert png.chunk_by_type("miDl").data_as_text() == "second"


def test_remove_chunk_not_found():
    png = sample_png()
    with pytest.raises(ChunkNotFoundError):
        png.remove_chunk("ruSt")
    assert len(png) == 3


@pytest.mark.parametrize("chunk_type", ["toolong", "ab", "a1cD", "\udcffabc"])
def test_remove_chunk_invalid_type(chunk_type):
    with pytest.raises(InvalidTypeCodeError):
        sample_png().remove_chunk(chunk_type)


def test_append_then_remove_restores_chunks():
    png = sample_png()
    png.append_chunk(chunk_from_strings("TeSt", "Message"))
    png.remove_chunk("TeSt")
    assert list(png.chunks) == sample_chunks()


def test_chunk_by_type():
    chunk = sample_png().chunk_by_type("FrSt")
    assert str(chunk.chunk_type) == "FrSt"
    assert chunk.data_as_text() == "I am the first chunk"


def test_chunk_by_type_missing():
    assert sample_png().chunk_by_type("ruSt") is None


def test_chunk_by_type_invalid_type_string():
    png = sample_png()
    assert png.chunk_by_type("nope!") is None
    assert png.chunk_by_type("a1cD") is None
    assert png.chunk_by_type("\udcffabc") is None


def test_critical_chunks(png_bytes):
    png = PngModel.parse(png_bytes)
    png.append_chunk(chunk_from_strings("ruSt", "hidden"))
    assert [str(c.chunk_type) for c in png.critical_chunks()] == ["IHDR", "IDAT", "IEND"]


def test_chunks_is_read_only_view():
    png = sample_png()
    assert isinstance(png.chunks, tuple)


def test_secret_message_survives_round_trip(png_bytes):
    png = PngModel.parse(png_bytes)
    png.append_chunk(chunk_from_strings("ruSt", "this is a secret message"))
    assert types_of(png)[-1] == "IEND"

    parsed = PngModel.parse(png.serialize())
    chunk = parsed.chunk_by_type("ruSt")
    assert chunk.data_as_text() == "this is a secret message"


def test_write_to_file(tmp_path):
    png = sample_png()
    path = tmp_path / "out.png"
    with open(path, "wb") as file:
        png.write_to_file(file)
    assert path.read_bytes() == png.serialize()


def test_str():
    png = PngModel.from_chunks([])
    assert str(png) == str(list(PNG_SIGNATURE))

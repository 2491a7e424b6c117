import pytest

from tests.png_samples import minimal_png_bytes


@pytest.fixture
def png_bytes():
    return minimal_png_bytes()


@pytest.fixture
def png_file(tmp_path, png_bytes):
    path = tmp_path / "image.png"
    path.write_bytes(png_bytes)
    return path

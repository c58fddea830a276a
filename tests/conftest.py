import pathlib

import pytest

from elf_builder import sample_builder
from shared.config import RdelfConfig
from shared.logger import RdelfLogger


@pytest.fixture
def sample_image() -> bytes:
    """Little-endian sample executable image."""
    return sample_builder().build()


@pytest.fixture
def sample_image_be() -> bytes:
    """Big-endian twin of :func:`sample_image`."""
    return sample_builder("big").build()


@pytest.fixture
def sample_file(tmp_path: pathlib.Path, sample_image: bytes) -> pathlib.Path:
    """The little-endian sample image written to disk."""
    path = tmp_path / "sample.elf"
    path.write_bytes(sample_image)
    return path


@pytest.fixture
def quiet_logger() -> RdelfLogger:
    """Logger with no console handler."""
    return RdelfLogger("test", log_level="DEBUG", console_output=False)


@pytest.fixture
def default_config() -> RdelfConfig:
    return RdelfConfig()

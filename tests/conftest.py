"""Shared fixtures for the tests."""

import sys

import pytest
from loguru import logger

IMAGES = (
    "REPOSITORY   TAG           IMAGE ID       CREATED         SIZE\n"
    "vault        1.8.4         dc15db720d79   2 days ago      186MB\n"
    "redis        6.2-alpine    6960a2858b36   3 days ago      31.3MB\n"
    "postgres     14.0-alpine   ae192c4d3ada   17 months ago   152MB\n"
    "traefik      2.5           72bfc37343a4   18 months ago   68.9MB\n"
)


@pytest.fixture(name="images_text")
def images_text_fixture():
    """The output of `docker images`, used as a five line input."""
    return IMAGES


@pytest.fixture(name="images_lines")
def images_lines_fixture(images_text):
    return images_text.splitlines(keepends=True)


@pytest.fixture(name="images_file")
def images_file_fixture(tmp_path, images_text):
    path = tmp_path / "images.txt"
    path.write_text(images_text, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Commands reconfigure the global logger; put a plain stderr sink back after each test."""
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")

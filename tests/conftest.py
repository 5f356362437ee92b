from pathlib import Path

import pytest

from fontface.models import FvarTable

from helpers import WEIGHT_SLANT_AXES, build_font_file, make_axis, make_parsed_font


@pytest.fixture
def font_factory(tmp_path):
    """Factory fixture: font_factory("name.ttf", **build_font_file kwargs) -> Path."""

    def _create(filename: str = "TestSans-Regular.ttf", **kwargs) -> Path:
        return build_font_file(tmp_path / filename, **kwargs)

    return _create


@pytest.fixture
def static_font(font_factory):
    return font_factory("TestSans-Regular.ttf")


@pytest.fixture
def italic_font(font_factory):
    return font_factory("TestSans-Italic.ttf", weight=700, italic=True)


@pytest.fixture
def variable_font(font_factory):
    return font_factory("TestSans-VF.ttf", family="Test Flex", axes=WEIGHT_SLANT_AXES)


@pytest.fixture
def woff2_font(font_factory):
    return font_factory("TestSans-Regular.woff2", flavor="woff2")


@pytest.fixture
def parsed_static():
    return make_parsed_font()


@pytest.fixture
def parsed_variable():
    return make_parsed_font(
        fvar=FvarTable(
            axes=[make_axis("wght", 100, 400, 900), make_axis("slnt", -10, 0, 0)]
        )
    )

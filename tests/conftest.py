"""Shared fixtures for the cliparams test suite."""

import pytest

from cliparams import Application, FlagBinder, Kind, ParameterRegistry


@pytest.fixture
def registry():
    """An empty parameter registry."""
    return ParameterRegistry()


@pytest.fixture
def binder():
    """An empty flag binder."""
    return FlagBinder()


@pytest.fixture
def demo_app():
    """Application declaring one parameter of each flavour."""
    app = Application(
        "The Big Test",
        "Does absolutely nothing.",
        category="Toys",
        version="1.0",
        contributor="Santa",
    )
    app.param("Basic Types", "Bool Param", Kind.BOOLEAN).declare("Just a test", "b").set(True)
    app.param("EnumTypes", "Double Enum", Kind.DOUBLE_ENUMERATION).set_enumeration("0.1,0.2,0.3,0.4")
    app.param("EnumTypes", "Double Enum", Kind.DOUBLE).set(0.3)
    app.param("Vector Types", "Double Vec", Kind.DOUBLE_VECTOR).text = "1,2,3,4"
    (
        app.param("Special", "File", Kind.FILE)
        .set_file_extensions("bli,bla,blbub")
        .declare("Input File", 0)
        .set_channel(True)
    )
    app.param("Special", "Slider", Kind.DOUBLE).set_range(0, 1)
    app.param("Special", "Slider", Kind.DOUBLE).set(0.333)
    return app

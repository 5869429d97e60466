import importlib

import pytest


def test_import_package():
    try:
        module = importlib.import_module("graphalgs")
    except ModuleNotFoundError as exc:  # pragma: no cover
        pytest.skip(f"Missing dependency: {exc.name}")
    assert hasattr(module, "Graph")
    assert hasattr(module, "TarjanSCC")


def test_unknown_attribute_raises():
    module = importlib.import_module("graphalgs")
    with pytest.raises(AttributeError):
        module.NoSuchAlgorithm


def test_dir_lists_public_names():
    module = importlib.import_module("graphalgs")
    assert "AcyclicSP" in dir(module)

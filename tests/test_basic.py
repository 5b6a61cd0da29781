"""
Basic sanity tests for package setup
"""

import logging

import relalg


def test_version():
    """Test that version is defined"""
    assert hasattr(relalg, "__version__")
    assert relalg.__version__ == "0.1.0"


def test_import():
    """Test that package can be imported"""
    import relalg.core
    import relalg.formatters
    import relalg.generators
    import relalg.logic
    import relalg.operators

    # All subpackages should be importable
    assert relalg is not None


def test_public_api():
    """Test that the main API is re-exported at the top level"""
    for name in relalg.__all__:
        assert hasattr(relalg, name), name


def test_library_logger_is_silent():
    """Test that the package logger has a NullHandler attached"""
    handlers = logging.getLogger("relalg").handlers

    assert any(isinstance(h, logging.NullHandler) for h in handlers)

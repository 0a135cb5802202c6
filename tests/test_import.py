#!/usr/bin/env python3
"""
Simple test to verify that the KVParse module can be imported correctly
and exposes its public API.
"""
import logging

logger = logging.getLogger(__name__)


def test_import():
    """Test importing the KVParse module."""
    import KVParse
    from KVParse import Settings, Store, get_settings

    assert isinstance(Settings, type), "Settings is not a class"
    assert isinstance(Store, type), "Store is not a class"
    assert callable(get_settings), "get_settings is not callable"
    assert KVParse.__version__

    for name in KVParse.__all__:
        assert hasattr(KVParse, name), f"{name} missing from KVParse"
    logger.info("All import tests passed!")


def test_cli_entry_point():
    """Test that the CLI entry points resolve."""
    from KVParse.__main__ import main
    from KVParse.cli import main as cli_main

    assert main is cli_main

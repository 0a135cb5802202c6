"""
Command-line interface module for the KVParse package.

This module provides a command-line interface for inspecting configuration
files. It includes commands for dumping a file, reading a single typed value,
and checking files for syntax errors.

Key Components:
- main: Main entry point for the CLI
"""

from KVParse.cli.commands import main

__all__ = ['main']

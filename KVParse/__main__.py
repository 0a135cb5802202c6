#!/usr/bin/env python3
"""
Main entry point for the KVParse package when run as a module.

This module provides the entry point for running the KVParse package as a module
using `python -m KVParse`. It delegates to the CLI's main function.

Example:
    $ python -m KVParse dump run.cfg
    $ python -m KVParse get run.cfg seed --type unsigned
    $ python -m KVParse check run.cfg defaults.cfg
"""

from KVParse.cli.commands import main

if __name__ == "__main__":
    main()

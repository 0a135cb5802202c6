#!/usr/bin/env python3
"""
Entry point for the KVParse CLI.
This allows running the CLI directly with `python cli.py`.
"""
from KVParse.cli.commands import main

if __name__ == '__main__':
    main()

"""
Command Line Interface Package for Moto Modem Status Client

This package provides a modular CLI implementation with separated concerns:
- args.py: Argument parsing and validation
- formatters.py: Output formatting for channel data
- logging_setup.py: Logging configuration
- main.py: Main orchestration and entry point
"""

from .main import main

__all__ = ["main"]

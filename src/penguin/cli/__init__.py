"""
Penguin Command-Line Interface
==============================

This package provides command-line tools for the Penguin toolchain:

- **pnglex**: Lex a Penguin source file or string and print its tokens

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["pnglex"]

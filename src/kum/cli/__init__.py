"""
Kum Command-Line Interface
==========================

This package provides the kum command-line tool:

- **kum repl**: Interactive loop that tokenizes each entered line
- **kum tokenize**: Tokenize a source file and print its tokens

The tool is a Click-based CLI application with consistent error
reporting and exit codes (see kum.cli.errors).
"""

__all__ = ["main"]

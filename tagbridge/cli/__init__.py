# tagbridge/cli/__init__.py
"""
tagbridge CLI.

Usage:
    tagbridge run src/*.c -p "python3 tagger.py" -k "function:f:d"
    tagbridge kinds -k "function:f:d,call:c:r:@"
    tagbridge version
"""

from tagbridge.cli.cli import app

__all__ = ["app"]

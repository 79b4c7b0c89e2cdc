"""
Presentation — Display layer for the Quill CLI

- Output: encoding-safe printing, JSON rendering
"""

from .output import safe_print, render_json, UNICODE_TO_ASCII

__all__ = [
    "safe_print", "render_json", "UNICODE_TO_ASCII",
]

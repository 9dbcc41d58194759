"""
wordguard — Per-language banned-word constraint for text fields.

A text value is checked against the banned-word lists of one or more
languages. Any hit in any selected language makes the value invalid.
"""

__version__ = "0.1.0"

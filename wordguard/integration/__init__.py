"""
Integration — Adapters binding the check to host validation frameworks.
"""

from wordguard.integration.constraints import ERROR_TYPE, NotBadWord

__all__ = ["ERROR_TYPE", "NotBadWord"]

"""Core of gtx-translate.

This package holds the translation client and the request/response mapping it is built on.
"""

from core.version import VERSION

__all__: list[str] = ["VERSION"]

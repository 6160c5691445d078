"""Unit tests for gtx-translate.

Tests use pytest with asyncio support; HTTP calls are replaced with in-memory transports or a
monkeypatched aiohttp session, so no test touches the network.
"""

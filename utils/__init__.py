"""Utility modules for gtx-translate."""

from utils.logger_utils import LoggerUtils

__all__: list[str] = ["LoggerUtils"]

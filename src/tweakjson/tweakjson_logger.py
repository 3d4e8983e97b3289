"""
Structured logger for tweakjson.
"""

import inspect
import json
import logging
from datetime import datetime

from pydantic import BaseModel


class LogLine(BaseModel):
    """
    Represents a line in the tweakjson log
    """

    time: str
    level: str
    caller_file: str
    caller_name: str
    caller_line: int
    message: str


class TweakjsonLogger:
    """
    Logger class
    """

    def __init__(self, name: str = "tweakjson") -> None:
        self.logger = logging.getLogger(name)

    def log(self, debug_message: str, level: int) -> None:
        """
        Log the message as a single JSON line, tagged with the caller's location.
        """
        debug_message = debug_message.replace("\n", " ")

        if not self.logger.isEnabledFor(level):
            return

        caller_file = "unknown"
        caller_name = "unknown"
        caller_line = 0
        frame = inspect.currentframe()
        if frame is not None and frame.f_back is not None:
            caller_file = frame.f_back.f_code.co_filename.split("/")[-1]
            caller_name = frame.f_back.f_code.co_name
            caller_line = frame.f_back.f_lineno

        self.logger.log(
            level=level,
            msg=json.dumps(
                LogLine(
                    time=str(datetime.now()),
                    level=logging.getLevelName(level),
                    caller_file=caller_file,
                    caller_name=caller_name,
                    caller_line=caller_line,
                    message=debug_message,
                ).model_dump()
            ),
        )

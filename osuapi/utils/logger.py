import datetime
import logging
import sys
from typing import Optional, TextIO

from pythonjsonlogger import json

from osuapi.config import DEFAULT_LOG_LEVEL


class CustomJsonFormatter(json.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)
        if not log_record.get('timestamp'):
            # this doesn't use record.created, so it is slightly off
            now = datetime.datetime.now(datetime.timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.%fZ')
            log_record['timestamp'] = now
        if log_record.get('level'):
            log_record['level'] = log_record['level'].upper()
        else:
            log_record['level'] = record.levelname


class JsonStreamHandler(logging.StreamHandler):
    pass


formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s')


def setup_logger(level: Optional[str] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attaches a JSON stdout handler to the "osuapi" logger.
    Calling it again replaces the handler instead of stacking another one.
    """
    logger = logging.getLogger("osuapi")
    logger.setLevel((level or DEFAULT_LOG_LEVEL).upper())

    for handler in list(logger.handlers):
        if isinstance(handler, JsonStreamHandler):
            logger.removeHandler(handler)

    handler = JsonStreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger

import json
import logging
from logging.config import dictConfig


class JsonLogFormatter(logging.Formatter):
    def format(self, record):
        return json.dumps({
            'severity': record.levelname,
            'logger': record.name,
            'message': super().format(record),
        })


def configure(logging_config=None):
    '''apply a `logging.config.dictConfig`-style config (default `doikernel.settings.LOGGING`)

    doikernel itself never calls this; applications may
    '''
    if logging_config is None:
        from doikernel import settings
        logging_config = settings.LOGGING
    dictConfig(logging_config)

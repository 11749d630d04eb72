import os


def _env_flag(name: str, default: bool = False) -> bool:
    _value = os.environ.get(name)
    if _value is None:
        return default
    return _value.strip().lower() in ('1', 'true', 'yes', 'on')


# publisher name used when a resource has none of its own
DEFAULT_PUBLISHER = os.environ.get('DOIKERNEL_DEFAULT_PUBLISHER', 'GFZ Data Services')

KERNEL_SCHEMA_VERSION = os.environ.get('DOIKERNEL_SCHEMA_VERSION', '4.6')
KERNEL_SCHEMA_LOCATION = os.environ.get(
    'DOIKERNEL_SCHEMA_LOCATION',
    f'https://schema.datacite.org/meta/kernel-{KERNEL_SCHEMA_VERSION}/metadata.xsd',
)

XML_PRETTY_PRINT = _env_flag('DOIKERNEL_XML_PRETTY')

LOG_LEVEL = os.environ.get('DOIKERNEL_LOG_LEVEL', 'INFO').upper()
LOG_JSON = _env_flag('DOIKERNEL_LOG_JSON')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'console': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
        'json': {
            '()': 'doikernel.log.JsonLogFormatter',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': ('json' if LOG_JSON else 'console'),
        },
    },
    'loggers': {
        'doikernel': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}

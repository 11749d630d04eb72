'''check kernel json attributes against a bundled json schema

non-strict (the default) allows draft resources without a doi; strict mode,
for registration, also requires `identifiers`
'''
import json
import logging
import os

from jsonschema import Draft4Validator

from doikernel import settings
from doikernel.exceptions import SchemaViolation
from doikernel.util.json import JsonObject


_logger = logging.getLogger(__name__)

_SCHEMA_PATH = os.path.join(
    os.path.dirname(os.path.abspath(__file__)),
    'static',
    'datacite_attributes.schema.json',
)

with open(_SCHEMA_PATH) as fobj:
    ATTRIBUTES_VALIDATOR = Draft4Validator(json.load(fobj))

# how many errors to put in a log message
_LOGGED_ERROR_LIMIT = 10


def validate_attributes(attributes: JsonObject, *, strict: bool = False) -> None:
    '''raise SchemaViolation (with every error found) if `attributes` are not valid kernel json
    '''
    _errors = attribute_errors(attributes, strict=strict)
    if _errors:
        _logger.error(
            'kernel json for %s failed validation (%d errors): %s',
            attributes.get('doi', 'a resource without doi'),
            len(_errors),
            '; '.join(_error['message'] for _error in _errors[:_LOGGED_ERROR_LIMIT]),
        )
        raise SchemaViolation(
            f'kernel json failed validation against datacite schema {settings.KERNEL_SCHEMA_VERSION}',
            _errors,
            schema_version=settings.KERNEL_SCHEMA_VERSION,
        )


def is_valid(attributes: JsonObject, *, strict: bool = False) -> bool:
    return not attribute_errors(attributes, strict=strict)


def attribute_errors(attributes: JsonObject, *, strict: bool = False) -> list[dict[str, str]]:
    '''every problem with the given attributes, sorted by path

    >>> attribute_errors({'titles': []})[0]
    {'path': '/', 'message': "'creators' is a required property (at /)", 'keyword': 'required'}
    '''
    _errors = [
        _error_fields(_error)
        for _error in ATTRIBUTES_VALIDATOR.iter_errors(attributes)
    ]
    if strict and not attributes.get('identifiers'):
        _errors.append({
            'path': '/identifiers',
            'message': 'identifiers are required for doi registration (at /identifiers)',
            'keyword': 'required',
        })
    return sorted(_errors, key=lambda _error: (_error['path'], _error['keyword'], _error['message']))


def _error_fields(error) -> dict[str, str]:
    _path = '/' + '/'.join(str(_step) for _step in error.absolute_path)
    return {
        'path': _path,
        'message': f'{error.message} (at {_path})',
        'keyword': str(error.validator),
    }

from __future__ import annotations
import re


###
# types for json-serializable stuff

JsonPrimitive = str | int | float | bool | None

type JsonValue = JsonPrimitive | list[JsonValue] | JsonObject

type JsonObject = dict[str, JsonValue]


_URI_SUFFIX = re.compile(r'URI$')


def json_key(field_name: str) -> str:
    '''kernel field name to the camelCase key used in kernel json

    >>> json_key('schemeURI')
    'schemeUri'
    >>> json_key('awardURI')
    'awardUri'
    >>> json_key('nameIdentifierScheme')
    'nameIdentifierScheme'
    '''
    return _URI_SUFFIX.sub('Uri', field_name)

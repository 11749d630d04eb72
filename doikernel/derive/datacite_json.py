'''datacite kernel-4 json, in the "attributes" shape of the datacite rest api

same fields as the xml, with camelCase keys (`schemeURI` => `schemeUri`) and
no attribute/element distinction; numbers (e.g. coordinates) stay numbers
'''
import json
import logging

from doikernel.canonical import CanonicalDocument
from doikernel.util.frozen import thaw
from doikernel.util.json import JsonObject, JsonValue, json_key
from doikernel.vocab import mediatypes
from doikernel.vocab.namespaces import DATACITE

from ._base import KernelDeriver


_logger = logging.getLogger(__name__)

# kernel json renames a couple top-level elements
_TOP_LEVEL_KEYS = {
    'identifier': 'identifiers',
    'resourceType': 'types',
}


class DataciteJsonDeriver(KernelDeriver):
    # abstract method from KernelDeriver
    @staticmethod
    def deriver_name() -> str:
        return 'datacite_json'

    # abstract method from KernelDeriver
    @staticmethod
    def mediatype() -> str:
        return mediatypes.DATACITE_JSON

    # abstract method from KernelDeriver
    def derive_as_bytes(self) -> bytes:
        _logger.debug('deriving kernel json for %s', self.resource.doi or 'a resource without doi')
        return json.dumps(
            to_json(self.canonical),
            ensure_ascii=False,
        ).encode('utf-8')


def to_json(canonical: CanonicalDocument) -> JsonObject:
    _attributes: JsonObject = {}
    _identifier = canonical.get('identifier')
    if _identifier is not None:
        _attributes['doi'] = _identifier['identifier']
    for _element_name, _value in canonical.items():
        _key = _TOP_LEVEL_KEYS.get(_element_name, _element_name)
        if _element_name == 'identifier':
            _attributes[_key] = [_camel_keys(thaw(_value))]
        else:
            _attributes[_key] = _camel_keys(thaw(_value))
    _attributes['schemaVersion'] = DATACITE
    return _attributes


def to_json_envelope(canonical: CanonicalDocument) -> JsonObject:
    '''wrap kernel json as a datacite rest api request body
    '''
    return {
        'data': {
            'type': 'dois',
            'attributes': to_json(canonical),
        },
    }


def _camel_keys(value: JsonValue) -> JsonValue:
    if isinstance(value, dict):
        return {
            json_key(_key): _camel_keys(_val)
            for _key, _val in value.items()
        }
    if isinstance(value, list):
        return [_camel_keys(_val) for _val in value]
    return value

'''doikernel: export resource metadata as datacite metadata kernel xml and json
'''
from doikernel.canonical import canonicalize
from doikernel.derive.datacite_json import to_json, to_json_envelope
from doikernel.derive.datacite_xml import to_xml
from doikernel.model import Resource
from doikernel.util.json import JsonObject

__all__ = (
    'canonicalize',
    'export_json',
    'export_xml',
)


def export_xml(resource: Resource) -> bytes:
    return to_xml(canonicalize(resource))


def export_json(resource: Resource, *, envelope: bool = False) -> JsonObject:
    _canonical = canonicalize(resource)
    return (
        to_json_envelope(_canonical)
        if envelope
        else to_json(_canonical)
    )

'''read-only trees of json-like values, and back again
'''
from collections.abc import Mapping
import types
from typing import Any

# leaf values allowed in a frozen tree
_LEAF_TYPES = (
    str,
    int,
    float,
    bool,
    type(None),
)


def freeze(obj: Any) -> Any:
    '''a read-only copy of a tree of mappings, lists and scalars

    mappings become `MappingProxyType` (key order kept), lists become tuples

    >>> freeze({'titles': [{'title': 'a'}]})
    mappingproxy({'titles': (mappingproxy({'title': 'a'}),)})
    >>> freeze({'creators': []})['creators']
    ()
    >>> freeze({'sizes': {'12 MB'}})
    Traceback (most recent call last):
      ...
    ValueError: how freeze {'12 MB'}?
    '''
    if isinstance(obj, Mapping):
        return types.MappingProxyType({
            _key: freeze(_val)
            for _key, _val in obj.items()
        })
    if isinstance(obj, (list, tuple)):
        return tuple(map(freeze, obj))
    if isinstance(obj, _LEAF_TYPES):
        return obj
    raise ValueError(f'how freeze {obj!r}?')


def thaw(obj: Any) -> Any:
    '''undo `freeze` into plain (json-friendly) lists and dicts

    >>> thaw(freeze({'a': [1, {'b': (2,)}]}))
    {'a': [1, {'b': [2]}]}
    '''
    if isinstance(obj, Mapping):
        return {_key: thaw(_val) for _key, _val in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [thaw(_val) for _val in obj]
    return obj

from __future__ import annotations
from typing import TYPE_CHECKING

from doikernel.util import extensions

from . import (
    datacite_json,
    datacite_xml,
)
if TYPE_CHECKING:
    from collections.abc import Iterable
    from ._base import KernelDeriver

DERIVER_SET: tuple[type[KernelDeriver], ...] = (
    datacite_xml.DataciteXmlDeriver,
    datacite_json.DataciteJsonDeriver,
)


def get_deriver_classes(
    deriver_name_filter: Iterable[str] | None = None,
) -> tuple[type[KernelDeriver], ...]:
    if deriver_name_filter is None:
        return DERIVER_SET
    return tuple(
        _deriver_class
        for _deriver_class in DERIVER_SET
        if _deriver_class.deriver_name() in deriver_name_filter
    )


def get_deriver_class(deriver_name: str) -> type[KernelDeriver]:
    '''look up a deriver by name among installed `doikernel.derivers` entry points
    '''
    return extensions.get_extension(deriver_name, namespace=extensions.DERIVER_NAMESPACE)

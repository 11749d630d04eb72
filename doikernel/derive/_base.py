import abc
import re

from doikernel.canonical import CanonicalDocument, canonicalize
from doikernel.model import Resource
from doikernel.vocab import mediatypes


class KernelDeriver(abc.ABC):
    '''renders one resource in one kernel syntax

    the resource is canonicalized once, on construction; rendering is a pure
    function of that canonical tree
    '''
    resource: Resource
    canonical: CanonicalDocument

    def __init__(self, resource: Resource):
        self.resource = resource
        self.canonical = canonicalize(resource)

    def filename(self) -> str:
        _stem = re.sub(r'[^\w.-]+', '_', self.resource.doi or 'resource')
        return f'{_stem}-datacite{mediatypes.dot_extension(self.mediatype())}'

    ###
    # for subclasses to implement:

    @staticmethod
    @abc.abstractmethod
    def deriver_name() -> str:
        raise NotImplementedError

    @staticmethod
    @abc.abstractmethod
    def mediatype() -> str:
        raise NotImplementedError

    @abc.abstractmethod
    def derive_as_bytes(self) -> bytes:
        raise NotImplementedError

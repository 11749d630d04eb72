import inspect


class DoiKernelError(Exception):
    error_location: str = ''

    def __init__(self, *args):
        super().__init__(*args)
        self.error_location = _get_nearest_code_location()


###
# building the model (input invariants)

class ModelError(DoiKernelError):
    pass


class InvalidAgent(ModelError):
    pass


class InvalidDateShape(ModelError):
    pass


class InvalidGeoShape(ModelError):
    pass


###
# canonicalizing

class CanonicalizeError(DoiKernelError):
    pass


class UnsupportedAgentKind(CanonicalizeError):
    pass


###
# serializing

class SerializationError(DoiKernelError):
    pass


class XmlSerializationError(SerializationError):
    pass


###
# validating json output

class ValidationError(DoiKernelError):
    pass


class SchemaViolation(ValidationError):
    def __init__(self, message, errors=(), *, schema_version=''):
        super().__init__(message)
        self.errors = list(errors)
        self.schema_version = schema_version


###
# plugins

class ExtensionsError(DoiKernelError):
    pass


###
# local helpers

def _get_nearest_code_location() -> str:
    try:
        _raise_frame = next(
            _frameinfo for _frameinfo in inspect.stack()
            if _frameinfo.filename != __file__  # nearest frame not in this file
        )
        return f'{_raise_frame.filename}::{_raise_frame.lineno}'
    except Exception:
        return 'unknown'  # eh, whatever

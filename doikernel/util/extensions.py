import functools

from stevedore import extension

from doikernel.exceptions import ExtensionsError


# entry-point namespace where kernel derivers are registered (see pyproject.toml)
DERIVER_NAMESPACE = 'doikernel.derivers'


def _raise_load_failure(manager, entrypoint, exception):
    raise ExtensionsError(f'could not load "{entrypoint.name}" from "{manager.namespace}"') from exception


@functools.cache
def _extension_manager(namespace: str) -> extension.ExtensionManager:
    # loaded once per namespace, on first request
    return extension.ExtensionManager(
        namespace,
        on_load_failure_callback=_raise_load_failure,
    )


def extension_names(namespace: str = DERIVER_NAMESPACE) -> list[str]:
    return sorted(_extension_manager(namespace).names())


def get_extension(name: str, namespace: str = DERIVER_NAMESPACE):
    '''the plugin registered as `name` in the given entry-point namespace

    raises ExtensionsError for unknown names or broken entry points
    '''
    try:
        _manager = _extension_manager(namespace)
    except ExtensionsError:
        raise
    except Exception as exc:
        raise ExtensionsError(f'could not load extension namespace "{namespace}"') from exc
    try:
        return _manager[name].plugin
    except KeyError:
        raise ExtensionsError(
            f'no extension "{name}" in "{namespace}" (have: {", ".join(_manager.names()) or "none"})'
        )

XML = 'application/xml'
JSON = 'application/json'
DATACITE_XML = 'application/vnd.datacite.datacite+xml'
DATACITE_JSON = 'application/vnd.datacite.datacite+json'


_file_extensions = {
    XML: '.xml',
    JSON: '.json',
    DATACITE_XML: '.xml',
    DATACITE_JSON: '.json',
}

_PARAMETER_DELIMITER = ';'


def strip_mediatype_parameters(mediatype: str) -> str:
    """from a full mediatype that may have parameters, get only the base mediatype

    >>> strip_mediatype_parameters('application/xml;charset=utf-8')
    'application/xml'
    >>> strip_mediatype_parameters('application/json')
    'application/json'
    """
    (_base, _, __) = mediatype.partition(_PARAMETER_DELIMITER)
    return _base.strip()


def dot_extension(mediatype: str) -> str:
    '''
    >>> dot_extension('application/vnd.datacite.datacite+xml; charset=utf-8')
    '.xml'
    '''
    try:
        return _file_extensions[strip_mediatype_parameters(mediatype)]
    except KeyError:
        raise ValueError(f'unrecognized mediatype: {mediatype}')

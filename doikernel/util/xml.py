import re
from typing import Any

from lxml import etree

from doikernel import exceptions as kernel_exceptions
from doikernel.vocab.namespaces import XML_NAMESPACES


# match characters not allowed in XML
RE_XML_ILLEGAL = re.compile(
    '([\u0000-\u0008\u000b-\u000c\u000e-\u001f\ufffe-\uffff])'
    + '|'
    + (
        '([%s-%s][^%s-%s])|([^%s-%s][%s-%s])|([%s-%s]$)|(^[%s-%s])'
        % (
            chr(0xd800), chr(0xdbff), chr(0xdc00), chr(0xdfff),
            chr(0xd800), chr(0xdbff), chr(0xdc00), chr(0xdfff),
            chr(0xd800), chr(0xdbff), chr(0xdc00), chr(0xdfff)
        )
    )
)


def xml_text(value: Any) -> str:
    '''stringify a value for use as xml text or attribute value

    values xml 1.0 cannot hold are an error, never silently changed

    >>> xml_text(13.25)
    '13.25'
    >>> xml_text(True)
    'true'
    >>> xml_text('tab\\t is fine')
    'tab\\t is fine'
    >>> xml_text('fine\\x00')
    Traceback (most recent call last):
      ...
    doikernel.exceptions.XmlSerializationError: character not allowed in xml: '\\x00' (in 'fine\\x00')
    '''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    _text = str(value)
    _illegal = RE_XML_ILLEGAL.search(_text)
    if _illegal is not None:
        raise kernel_exceptions.XmlSerializationError(
            f'character not allowed in xml: {_illegal.group()!r} (in {_text!r})'
        )
    return _text


def ns(namespace_prefix: str, tag_name: str) -> str:
    '''clark-notation name (`{uri}local`) for lxml, from a known prefix

    >>> ns('datacite', 'creatorName')
    '{http://datacite.org/schema/kernel-4}creatorName'
    >>> ns('xml', 'lang')
    '{http://www.w3.org/XML/1998/namespace}lang'
    '''
    return f'{{{XML_NAMESPACES[namespace_prefix]}}}{tag_name}'


def nsmap(*namespace_prefixes: str, default: str | None = None) -> dict[str | None, str]:
    '''lxml `nsmap` declaring the given prefixes (the `default` one unprefixed)

    >>> nsmap('xsi', default='datacite')
    {None: 'http://datacite.org/schema/kernel-4', 'xsi': 'http://www.w3.org/2001/XMLSchema-instance'}
    '''
    _wanted = {*namespace_prefixes, default}
    return {
        (None if _prefix == default else _prefix): _uri
        for _prefix, _uri in XML_NAMESPACES.items()
        if _prefix in _wanted
    }


# wrapper for lxml.etree.SubElement, adds `text` and `lang` kwargs for convenience
def SubEl(
    parent: etree.Element,
    tag_name: str,
    text: Any = None,
    *,
    lang: str | None = None,
    **kwargs: Any,
) -> etree.SubElement:
    element = etree.SubElement(parent, tag_name, **kwargs)
    if lang:
        element.set(ns('xml', 'lang'), lang)
    if text is not None and text != '':
        element.text = xml_text(text)
    return element

'''datacite kernel-4 xml, built with lxml from a canonical tree

see https://schema.datacite.org/meta/kernel-4/metadata.xsd
'''
from collections.abc import Mapping
import logging
import typing

from lxml import etree

from doikernel import exceptions as kernel_exceptions
from doikernel import settings
from doikernel.canonical import CanonicalDocument
from doikernel.util.xml import ns, nsmap, SubEl, xml_text
from doikernel.vocab import mediatypes
from doikernel.vocab.datacite import KERNEL_ELEMENT_ORDER
from doikernel.vocab.namespaces import DATACITE

from ._base import KernelDeriver


_logger = logging.getLogger(__name__)

type _Fields = Mapping[str, typing.Any]

# canonical fields written as xml attributes (rather than text), by element
ATTRIBUTE_FIELDS: Mapping[str, tuple[str, ...]] = {
    'identifier': ('identifierType',),
    'creatorName': ('nameType',),
    'contributorName': ('nameType',),
    'nameIdentifier': ('nameIdentifierScheme', 'schemeURI'),
    'affiliation': ('affiliationIdentifier', 'affiliationIdentifierScheme', 'schemeURI'),
    'title': ('titleType',),
    'publisher': ('publisherIdentifier', 'publisherIdentifierScheme', 'schemeURI'),
    'resourceType': ('resourceTypeGeneral',),
    'subject': ('subjectScheme', 'schemeURI', 'valueURI', 'classificationCode'),
    'date': ('dateType', 'dateInformation'),
    'alternateIdentifier': ('alternateIdentifierType',),
    'relatedIdentifier': (
        'relatedIdentifierType',
        'relationType',
        'resourceTypeGeneral',
        'relatedMetadataScheme',
        'schemeURI',
        'schemeType',
    ),
    'rights': ('rightsURI', 'rightsIdentifier', 'rightsIdentifierScheme', 'schemeURI'),
    'description': ('descriptionType',),
    'funderIdentifier': ('funderIdentifierType', 'schemeURI'),
    'awardNumber': ('awardURI',),
}


class DataciteXmlDeriver(KernelDeriver):
    # abstract method from KernelDeriver
    @staticmethod
    def deriver_name() -> str:
        return 'datacite_xml'

    # abstract method from KernelDeriver
    @staticmethod
    def mediatype() -> str:
        return mediatypes.DATACITE_XML

    # abstract method from KernelDeriver
    def derive_as_bytes(self) -> bytes:
        _logger.debug('deriving kernel xml for %s', self.resource.doi or 'a resource without doi')
        return to_xml(self.canonical)


def to_xml(canonical: CanonicalDocument) -> bytes:
    try:
        _resource_element = build_resource_element(canonical)
        return etree.tostring(
            _resource_element,
            xml_declaration=True,
            encoding='UTF-8',
            pretty_print=settings.XML_PRETTY_PRINT,
        )
    except (ValueError, TypeError, etree.LxmlError) as exc:
        raise kernel_exceptions.XmlSerializationError(f'could not build kernel xml: {exc}') from exc


def build_resource_element(canonical: CanonicalDocument) -> etree._Element:
    _resource_element = etree.Element(
        _dc('resource'),
        attrib={
            ns('xsi', 'schemaLocation'): f'{DATACITE} {settings.KERNEL_SCHEMA_LOCATION}',
        },
        nsmap=nsmap('xsi', default='datacite'),
    )
    for _element_name in KERNEL_ELEMENT_ORDER:
        _value = canonical.get(_element_name)
        if _value is not None:
            _ELEMENT_BUILDERS[_element_name](_resource_element, _value)
    return _resource_element


###
# element builders, one per top-level kernel element

def _build_identifier(parent: etree._Element, identifier: _Fields) -> None:
    _leaf(parent, 'identifier', identifier, text_field='identifier')


def _build_creators(parent: etree._Element, creators: typing.Iterable[_Fields]) -> None:
    _creators_element = SubEl(parent, _dc('creators'))
    for _creator in creators:
        _agent_element(_creators_element, 'creator', 'creatorName', _creator)


def _build_titles(parent: etree._Element, titles: typing.Iterable[_Fields]) -> None:
    _titles_element = SubEl(parent, _dc('titles'))
    for _title in titles:
        _leaf(_titles_element, 'title', _title, text_field='title')


def _build_publisher(parent: etree._Element, publisher: _Fields) -> None:
    _leaf(parent, 'publisher', publisher, text_field='name')


def _build_publication_year(parent: etree._Element, publication_year: str) -> None:
    SubEl(parent, _dc('publicationYear'), publication_year)


def _build_resource_type(parent: etree._Element, resource_type: _Fields) -> None:
    _leaf(parent, 'resourceType', resource_type, text_field='resourceType')


def _build_subjects(parent: etree._Element, subjects: typing.Iterable[_Fields]) -> None:
    _subjects_element = SubEl(parent, _dc('subjects'))
    for _subject in subjects:
        _leaf(_subjects_element, 'subject', _subject, text_field='subject')


def _build_contributors(parent: etree._Element, contributors: typing.Iterable[_Fields]) -> None:
    _contributors_element = SubEl(parent, _dc('contributors'))
    for _contributor in contributors:
        _agent_element(_contributors_element, 'contributor', 'contributorName', _contributor)


def _build_dates(parent: etree._Element, dates: typing.Iterable[_Fields]) -> None:
    _dates_element = SubEl(parent, _dc('dates'))
    for _date in dates:
        _leaf(_dates_element, 'date', _date, text_field='date')


def _build_language(parent: etree._Element, language: str) -> None:
    SubEl(parent, _dc('language'), language)


def _build_alternate_identifiers(parent: etree._Element, alternate_identifiers: typing.Iterable[_Fields]) -> None:
    _wrapper = SubEl(parent, _dc('alternateIdentifiers'))
    for _alternate_identifier in alternate_identifiers:
        _leaf(_wrapper, 'alternateIdentifier', _alternate_identifier, text_field='alternateIdentifier')


def _build_related_identifiers(parent: etree._Element, related_identifiers: typing.Iterable[_Fields]) -> None:
    _wrapper = SubEl(parent, _dc('relatedIdentifiers'))
    for _related in related_identifiers:
        _leaf(_wrapper, 'relatedIdentifier', _related, text_field='relatedIdentifier')


def _build_sizes(parent: etree._Element, sizes: typing.Iterable[str]) -> None:
    _sizes_element = SubEl(parent, _dc('sizes'))
    for _size in sizes:
        SubEl(_sizes_element, _dc('size'), _size)


def _build_formats(parent: etree._Element, formats: typing.Iterable[str]) -> None:
    _formats_element = SubEl(parent, _dc('formats'))
    for _format in formats:
        SubEl(_formats_element, _dc('format'), _format)


def _build_version(parent: etree._Element, version: str) -> None:
    SubEl(parent, _dc('version'), version)


def _build_rights_list(parent: etree._Element, rights_list: typing.Iterable[_Fields]) -> None:
    _rights_list_element = SubEl(parent, _dc('rightsList'))
    for _rights in rights_list:
        _leaf(_rights_list_element, 'rights', _rights, text_field='rights')


def _build_descriptions(parent: etree._Element, descriptions: typing.Iterable[_Fields]) -> None:
    _descriptions_element = SubEl(parent, _dc('descriptions'))
    for _description in descriptions:
        _leaf(_descriptions_element, 'description', _description, text_field='description')


def _build_geolocations(parent: etree._Element, geolocations: typing.Iterable[_Fields]) -> None:
    _geolocations_element = SubEl(parent, _dc('geoLocations'))
    for _geolocation in geolocations:
        _geolocation_element = SubEl(_geolocations_element, _dc('geoLocation'))
        if 'geoLocationPlace' in _geolocation:
            SubEl(_geolocation_element, _dc('geoLocationPlace'), _geolocation['geoLocationPlace'])
        if 'geoLocationPoint' in _geolocation:
            _coordinates_element(_geolocation_element, 'geoLocationPoint', _geolocation['geoLocationPoint'])
        if 'geoLocationBox' in _geolocation:
            _coordinates_element(_geolocation_element, 'geoLocationBox', _geolocation['geoLocationBox'])
        if 'geoLocationPolygon' in _geolocation:
            _polygon = _geolocation['geoLocationPolygon']
            _polygon_element = SubEl(_geolocation_element, _dc('geoLocationPolygon'))
            for _point in _polygon['polygonPoints']:
                _coordinates_element(_polygon_element, 'polygonPoint', _point)
            if 'inPolygonPoint' in _polygon:
                _coordinates_element(_polygon_element, 'inPolygonPoint', _polygon['inPolygonPoint'])


def _build_funding_references(parent: etree._Element, funding_references: typing.Iterable[_Fields]) -> None:
    _wrapper = SubEl(parent, _dc('fundingReferences'))
    for _funding in funding_references:
        _funding_element = SubEl(_wrapper, _dc('fundingReference'))
        SubEl(_funding_element, _dc('funderName'), _funding['funderName'])
        if 'funderIdentifier' in _funding:
            _leaf(_funding_element, 'funderIdentifier', _funding, text_field='funderIdentifier')
        # the kernel xsd only has awardURI as an attribute of awardNumber, so without
        # an award number the uri is json-only
        if 'awardNumber' in _funding:
            _leaf(_funding_element, 'awardNumber', _funding, text_field='awardNumber')
        if 'awardTitle' in _funding:
            SubEl(_funding_element, _dc('awardTitle'), _funding['awardTitle'])


_ELEMENT_BUILDERS: Mapping[str, typing.Callable[[etree._Element, typing.Any], None]] = {
    'identifier': _build_identifier,
    'creators': _build_creators,
    'titles': _build_titles,
    'publisher': _build_publisher,
    'publicationYear': _build_publication_year,
    'resourceType': _build_resource_type,
    'subjects': _build_subjects,
    'contributors': _build_contributors,
    'dates': _build_dates,
    'language': _build_language,
    'alternateIdentifiers': _build_alternate_identifiers,
    'relatedIdentifiers': _build_related_identifiers,
    'sizes': _build_sizes,
    'formats': _build_formats,
    'version': _build_version,
    'rightsList': _build_rights_list,
    'descriptions': _build_descriptions,
    'geoLocations': _build_geolocations,
    'fundingReferences': _build_funding_references,
}
if set(_ELEMENT_BUILDERS) != set(KERNEL_ELEMENT_ORDER):
    raise kernel_exceptions.SerializationError(
        'kernel xml builders do not match kernel element order:'
        f' {sorted(set(_ELEMENT_BUILDERS) ^ set(KERNEL_ELEMENT_ORDER))}'
    )


###
# local helpers

def _dc(tag_name: str) -> str:
    return ns('datacite', tag_name)


def _leaf(parent: etree._Element, tag_name: str, fields: _Fields, *, text_field: str) -> etree._Element:
    _attrib = {
        _attr_name: xml_text(fields[_attr_name])
        for _attr_name in ATTRIBUTE_FIELDS.get(tag_name, ())
        if fields.get(_attr_name) not in (None, '')
    }
    return SubEl(
        parent,
        _dc(tag_name),
        fields.get(text_field),
        lang=fields.get('lang'),
        attrib=_attrib,
    )


def _agent_element(parent: etree._Element, tag_name: str, name_tag_name: str, agent: _Fields) -> etree._Element:
    _attrib = (
        {'contributorType': xml_text(agent['contributorType'])}
        if 'contributorType' in agent
        else {}
    )
    _element = SubEl(parent, _dc(tag_name), attrib=_attrib)
    _leaf(_element, name_tag_name, agent, text_field='name')
    if 'givenName' in agent:
        SubEl(_element, _dc('givenName'), agent['givenName'])
    if 'familyName' in agent:
        SubEl(_element, _dc('familyName'), agent['familyName'])
    for _name_identifier in agent.get('nameIdentifiers', ()):
        _leaf(_element, 'nameIdentifier', _name_identifier, text_field='nameIdentifier')
    for _affiliation in agent.get('affiliation', ()):
        _leaf(_element, 'affiliation', _affiliation, text_field='name')
    return _element


def _coordinates_element(parent: etree._Element, tag_name: str, coordinates: _Fields) -> etree._Element:
    # coordinate fields are child elements, in canonical order
    _element = SubEl(parent, _dc(tag_name))
    for _coordinate_name, _coordinate in coordinates.items():
        SubEl(_element, _dc(_coordinate_name), _coordinate)
    return _element

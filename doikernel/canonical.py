'''canonicalize: a resource as a format-agnostic tree of kernel fields

the canonical tree is a read-only mapping, keyed by kernel element names in
schema order (see `doikernel.vocab.datacite.KERNEL_ELEMENT_ORDER`), with
nested read-only mappings and tuples for repeated things. optional things are
left out entirely (never empty strings or empty tuples), so serializers only
decide *how* to write each field, never *whether*.

both `doikernel.derive.datacite_xml` and `doikernel.derive.datacite_json`
render this same tree.
'''
from __future__ import annotations
from collections.abc import Iterable, Mapping
import logging
import typing

from doikernel import exceptions as kernel_exceptions
from doikernel import settings
from doikernel.model import (
    Affiliation,
    Box,
    ClosedRange,
    Contributor,
    Creator,
    FundingReference,
    GeoLocation,
    Institution,
    OpenEndedRange,
    Person,
    Point,
    Polygon,
    RelatedIdentifier,
    Resource,
    ResourceDate,
    Rights,
    Single,
    Subject,
)
from doikernel.util.frozen import freeze
from doikernel.vocab import datacite


_logger = logging.getLogger(__name__)

type CanonicalDocument = Mapping[str, typing.Any]

type _Fields = dict[str, typing.Any]


def canonicalize(resource: Resource) -> CanonicalDocument:
    _doc: _Fields = {}
    if resource.doi:
        _doc['identifier'] = {'identifier': resource.doi, 'identifierType': 'DOI'}
    _doc['creators'] = _canonical_creators(resource.creators)
    _doc['titles'] = _canonical_titles(resource)
    _doc['publisher'] = _canonical_publisher(resource)
    if resource.publication_year not in (None, ''):
        _doc['publicationYear'] = str(resource.publication_year)
    _doc['resourceType'] = {
        'resourceTypeGeneral': datacite.resource_type_general(resource.resource_type),
        'resourceType': resource.resource_type or datacite.DEFAULT_RESOURCE_TYPE,
    }
    _set_nonempty(_doc, 'subjects', [
        _canonical_subject(_subject)
        for _subject in resource.subjects
    ])
    _set_nonempty(_doc, 'contributors', [
        canonical_contributor(_contributor)
        for _contributor in _by_position(resource.contributors)
    ])
    _set_nonempty(_doc, 'dates', _canonical_dates(resource.dates))
    if resource.language:
        _doc['language'] = resource.language
    _set_nonempty(_doc, 'alternateIdentifiers', [
        {
            'alternateIdentifier': _alt.value,
            'alternateIdentifierType': _alt.identifier_type,
        }
        for _alt in resource.alternate_identifiers
    ])
    _set_nonempty(_doc, 'relatedIdentifiers', [
        _canonical_related_identifier(_related)
        for _related in _by_position(resource.related_identifiers)
    ])
    _set_nonempty(_doc, 'sizes', [_size for _size in resource.sizes if _size])
    _set_nonempty(_doc, 'formats', [_format for _format in resource.formats if _format])
    if resource.version:
        _doc['version'] = resource.version
    _set_nonempty(_doc, 'rightsList', [
        _canonical_rights(_rights, resource.language)
        for _rights in resource.rights
    ])
    _set_nonempty(_doc, 'descriptions', [
        _without_none({
            'description': _description.value,
            'descriptionType': _description.description_type or datacite.DEFAULT_DESCRIPTION_TYPE,
            'lang': _description.language or resource.language,
        })
        for _description in resource.descriptions
    ])
    _set_nonempty(_doc, 'geoLocations', _canonical_geolocations(resource.geo_locations))
    _set_nonempty(_doc, 'fundingReferences', [
        canonical_funding_reference(_funding)
        for _funding in resource.funding_references
    ])
    return freeze(_doc)


###
# names and identifiers

def format_person_name(person: Person) -> str:
    '''
    >>> format_person_name(Person(family_name='Doe', given_name='Jane'))
    'Doe, Jane'
    >>> format_person_name(Person(given_name='Jane'))
    'Jane'
    >>> format_person_name(Person())
    'Unknown'
    '''
    if person.family_name and person.given_name:
        return f'{person.family_name}, {person.given_name}'
    return person.family_name or person.given_name or datacite.UNKNOWN_PERSON_NAME


def format_institution_name(institution: Institution) -> str:
    '''
    >>> format_institution_name(Institution('GFZ'))
    'GFZ'
    >>> format_institution_name(Institution('  '))
    'Unknown Institution'
    >>> format_institution_name(Institution(None, is_laboratory=True))
    'Unknown Laboratory'
    '''
    if institution.name and institution.name.strip():
        return institution.name
    return (
        datacite.UNKNOWN_LABORATORY_NAME
        if institution.is_laboratory
        else datacite.UNKNOWN_INSTITUTION_NAME
    )


def canonical_name_identifier(identifier: str | None, scheme: str | None, *, default_scheme: str) -> _Fields | None:
    if not identifier:
        return None
    _scheme = scheme or default_scheme
    _scheme_uri = datacite.scheme_uri(_scheme)
    if not _scheme_uri:
        _logger.debug('no known scheme uri for name identifier scheme "%s"', _scheme)
    return {
        'nameIdentifier': identifier,
        'nameIdentifierScheme': _scheme,
        'schemeURI': _scheme_uri,
    }


def canonical_affiliation(affiliation: Affiliation) -> _Fields:
    _fields: _Fields = {'name': affiliation.name}
    if affiliation.identifier:
        _fields['affiliationIdentifier'] = affiliation.identifier
        _fields['affiliationIdentifierScheme'] = (
            affiliation.identifier_scheme or datacite.DEFAULT_AFFILIATION_SCHEME
        )
        if affiliation.scheme_uri:
            _fields['schemeURI'] = affiliation.scheme_uri
    return _fields


###
# creators and contributors

def person_agent_fields(person: Person, affiliations: Iterable[Affiliation]) -> _Fields:
    _fields: _Fields = {
        'name': format_person_name(person),
        'nameType': datacite.NAME_TYPE_PERSONAL,
    }
    if person.given_name:
        _fields['givenName'] = person.given_name
    if person.family_name:
        _fields['familyName'] = person.family_name
    _name_identifier = canonical_name_identifier(
        person.name_identifier,
        person.name_identifier_scheme,
        default_scheme=datacite.DEFAULT_PERSON_SCHEME,
    )
    if _name_identifier:
        _fields['nameIdentifiers'] = [_name_identifier]
    _set_nonempty(_fields, 'affiliation', [canonical_affiliation(_aff) for _aff in affiliations])
    return _fields


def institution_agent_fields(institution: Institution, affiliations: Iterable[Affiliation]) -> _Fields:
    _fields: _Fields = {
        'name': format_institution_name(institution),
        'nameType': datacite.NAME_TYPE_ORGANIZATIONAL,
    }
    _name_identifier = canonical_name_identifier(
        institution.name_identifier,
        institution.name_identifier_scheme,
        default_scheme=datacite.DEFAULT_INSTITUTION_SCHEME,
    )
    if _name_identifier:
        _fields['nameIdentifiers'] = [_name_identifier]
    _set_nonempty(_fields, 'affiliation', [canonical_affiliation(_aff) for _aff in affiliations])
    return _fields


def laboratory_agent_fields(institution: Institution, affiliations: Iterable[Affiliation]) -> _Fields:
    _fields: _Fields = {
        'name': format_institution_name(institution),
        'nameType': datacite.NAME_TYPE_ORGANIZATIONAL,
    }
    if institution.name_identifier:
        # lab identifiers have no resolvable scheme uri
        _fields['nameIdentifiers'] = [{
            'nameIdentifier': institution.name_identifier,
            'nameIdentifierScheme': (
                institution.name_identifier_scheme or datacite.DEFAULT_LABORATORY_SCHEME
            ),
        }]
    _set_nonempty(_fields, 'affiliation', [canonical_affiliation(_aff) for _aff in affiliations])
    return _fields


def canonical_creator(creator: Creator) -> _Fields:
    match creator.agent:
        case Person() as _person:
            return person_agent_fields(_person, creator.affiliations)
        case Institution() as _institution:
            return institution_agent_fields(_institution, creator.affiliations)
        case _unsupported:
            raise kernel_exceptions.UnsupportedAgentKind(f'creator is neither person nor institution: {_unsupported!r}')


def canonical_contributor(contributor: Contributor) -> _Fields:
    # agent fields built from the contributor's own affiliations
    match contributor.agent:
        case Institution(is_laboratory=True) as _laboratory:
            _agent_fields = laboratory_agent_fields(_laboratory, contributor.affiliations)
            _contributor_type = datacite.LABORATORY_CONTRIBUTOR_TYPE
        case Person() as _person:
            _agent_fields = person_agent_fields(_person, contributor.affiliations)
            _contributor_type = contributor.contributor_type or datacite.DEFAULT_CONTRIBUTOR_TYPE
        case Institution() as _institution:
            _agent_fields = institution_agent_fields(_institution, contributor.affiliations)
            _contributor_type = contributor.contributor_type or datacite.DEFAULT_CONTRIBUTOR_TYPE
        case _unsupported:
            raise kernel_exceptions.UnsupportedAgentKind(f'contributor is neither person nor institution: {_unsupported!r}')
    (_name_fields, _rest) = _split_fields(_agent_fields, ('name', 'nameType'))
    return {**_name_fields, 'contributorType': _contributor_type, **_rest}


def _canonical_creators(creators: Iterable[Creator]) -> list[_Fields]:
    _creators = [canonical_creator(_creator) for _creator in _by_position(creators)]
    if not _creators:  # the kernel requires at least one creator
        _creators.append({
            'name': datacite.UNKNOWN_PERSON_NAME,
            'nameType': datacite.NAME_TYPE_PERSONAL,
        })
    return _creators


###
# titles, publisher, subjects, rights

def _canonical_titles(resource: Resource) -> list[_Fields]:
    _titles = [
        _without_none({
            'title': _title.value,
            'titleType': datacite.title_type(_title.title_type),
            'lang': _title.language or resource.language,
        })
        for _title in resource.titles
    ]
    if not _titles:  # the kernel requires at least one title
        _titles.append({'title': datacite.UNTITLED})
    return _titles


def _canonical_publisher(resource: Resource) -> _Fields:
    _publisher = resource.publisher
    if _publisher is None:
        return _without_none({
            'name': settings.DEFAULT_PUBLISHER,
            'lang': resource.language,
        })
    _fields: _Fields = {'name': _publisher.name}
    if _publisher.identifier:
        _fields['publisherIdentifier'] = _publisher.identifier
        _fields['publisherIdentifierScheme'] = (
            _publisher.identifier_scheme or datacite.DEFAULT_INSTITUTION_SCHEME
        )
        if _publisher.scheme_uri:
            _fields['schemeURI'] = _publisher.scheme_uri
    _lang = _publisher.language or resource.language
    if _lang:
        _fields['lang'] = _lang
    return _fields


def _canonical_subject(subject: Subject) -> _Fields:
    return _without_none({
        'subject': subject.value,
        'subjectScheme': subject.subject_scheme,
        'schemeURI': subject.scheme_uri,
        'valueURI': subject.value_uri,
        'classificationCode': subject.classification_code,
        'lang': subject.language,
    })


def _canonical_rights(rights: Rights, resource_language: str | None) -> _Fields:
    _fields: _Fields = {'rights': rights.name}
    if rights.uri:
        _fields['rightsURI'] = rights.uri
    if rights.identifier:
        _fields['rightsIdentifier'] = rights.identifier
        _fields['rightsIdentifierScheme'] = datacite.RIGHTS_IDENTIFIER_SCHEME
        if rights.scheme_uri:
            _fields['schemeURI'] = rights.scheme_uri
    _lang = rights.language or resource_language
    if _lang:
        _fields['lang'] = _lang
    return _fields


def _canonical_related_identifier(related: RelatedIdentifier) -> _Fields:
    return _without_none({
        'relatedIdentifier': related.identifier,
        'relatedIdentifierType': related.identifier_type or datacite.DEFAULT_RELATED_IDENTIFIER_TYPE,
        'relationType': related.relation_type or datacite.DEFAULT_RELATION_TYPE,
        'resourceTypeGeneral': related.resource_type_general,
        'relatedMetadataScheme': related.related_metadata_scheme,
        'schemeURI': related.scheme_uri,
        'schemeType': related.scheme_type,
    })


###
# dates

def format_date_value(resource_date: ResourceDate) -> str | None:
    '''the kernel date string for a date's shape, or None to leave the date out

    >>> from doikernel.model import ResourceDate
    >>> format_date_value(ResourceDate.from_fields('Collected', start_date='2020-01', end_date='2020-06'))
    '2020-01/2020-06'
    >>> format_date_value(ResourceDate.from_fields('Collected', end_date='2020-06'))
    '2020-06'
    >>> format_date_value(ResourceDate.from_fields('Created', date_value='')) is None
    True
    '''
    match resource_date.shape:
        case ClosedRange(start=_start, end=_end):
            return f'{_start}/{_end}'
        case OpenEndedRange() as _open_range:
            # TODO: export as "start/" or "/end" once kernel support for open ranges is confirmed
            return _open_range.present_bound
        case Single(value=_value):
            return _value or None
    raise kernel_exceptions.CanonicalizeError(f'unknown date shape: {resource_date.shape!r}')


def _canonical_dates(resource_dates: Iterable[ResourceDate]) -> list[_Fields]:
    _dates = []
    for _resource_date in resource_dates:
        _value = format_date_value(_resource_date)
        if _value is None:
            continue
        _dates.append(_without_none({
            'date': _value,
            'dateType': _resource_date.date_type,
            'dateInformation': _resource_date.date_information,
        }))
    return _dates


###
# geolocations

def canonical_point(point: Point) -> _Fields | None:
    if not point.is_complete:
        return None
    return {
        'pointLongitude': point.longitude,
        'pointLatitude': point.latitude,
    }


def canonical_box(box: Box) -> _Fields | None:
    if not box.is_complete:
        return None
    return {
        'westBoundLongitude': box.west_bound_longitude,
        'eastBoundLongitude': box.east_bound_longitude,
        'southBoundLatitude': box.south_bound_latitude,
        'northBoundLatitude': box.north_bound_latitude,
    }


def canonical_polygon(polygon: Polygon) -> _Fields | None:
    if len(polygon.points) < 3:
        return None
    _fields: _Fields = {
        'polygonPoints': [canonical_point(_point) for _point in polygon.points],
    }
    if polygon.in_polygon_point is not None:
        _in_point = canonical_point(polygon.in_polygon_point)
        if _in_point is not None:
            _fields['inPolygonPoint'] = _in_point
    return _fields


def canonical_geolocation(geolocation: GeoLocation) -> _Fields | None:
    match geolocation.shape:
        case Point() as _point:
            (_key, _shape_fields) = ('geoLocationPoint', canonical_point(_point))
        case Box() as _box:
            (_key, _shape_fields) = ('geoLocationBox', canonical_box(_box))
        case Polygon() as _polygon:
            (_key, _shape_fields) = ('geoLocationPolygon', canonical_polygon(_polygon))
        case _:
            (_key, _shape_fields) = ('', None)
    if _shape_fields is None:
        return None
    _fields: _Fields = {}
    if geolocation.place:
        _fields['geoLocationPlace'] = geolocation.place
    _fields[_key] = _shape_fields
    return _fields


def _canonical_geolocations(geolocations: Iterable[GeoLocation]) -> list[_Fields]:
    _canonical = []
    for _geolocation in geolocations:
        _fields = canonical_geolocation(_geolocation)
        if _fields is None:
            _logger.debug('leaving out geolocation with no complete shape: %r', _geolocation)
        else:
            _canonical.append(_fields)
    return _canonical


###
# funding

def canonical_funding_reference(funding: FundingReference) -> _Fields:
    _fields: _Fields = {'funderName': funding.funder_name}
    if funding.funder_identifier:
        _fields['funderIdentifier'] = funding.funder_identifier
        _fields['funderIdentifierType'] = (
            funding.funder_identifier_type or datacite.DEFAULT_FUNDER_IDENTIFIER_TYPE
        )
        if funding.scheme_uri:
            _fields['schemeURI'] = funding.scheme_uri
    if funding.award_number:
        _fields['awardNumber'] = funding.award_number
    if funding.award_uri:
        _fields['awardURI'] = funding.award_uri
    if funding.award_title:
        _fields['awardTitle'] = funding.award_title
    return _fields


###
# local helpers

def _by_position(items: Iterable[typing.Any]) -> list:
    # stable: equal positions keep storage order
    return sorted(items, key=lambda _item: _item.position)


def _without_none(fields: _Fields) -> _Fields:
    return {
        _key: _value
        for _key, _value in fields.items()
        if _value is not None and _value != ''
    }


def _set_nonempty(fields: _Fields, key: str, values: list) -> None:
    if values:
        fields[key] = values


def _split_fields(fields: _Fields, keys: Iterable[str]) -> tuple[_Fields, _Fields]:
    _keys = set(keys)
    return (
        {_key: _value for _key, _value in fields.items() if _key in _keys},
        {_key: _value for _key, _value in fields.items() if _key not in _keys},
    )

from unittest import TestCase, mock

from doikernel import exceptions as kernel_exceptions
from doikernel import settings
from doikernel.canonical import (
    canonical_contributor,
    canonical_creator,
    canonical_funding_reference,
    canonical_geolocation,
    canonical_name_identifier,
    canonicalize,
    format_date_value,
    format_person_name,
)
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
    Publisher,
    Resource,
    ResourceDate,
    Rights,
    Single,
    Subject,
    Title,
)
from doikernel.vocab.datacite import KERNEL_ELEMENT_ORDER

from tests._input_output_tests import BasicInputOutputTestCase
from tests.derive._inputs import DERIVER_TEST_RESOURCES


class TestPersonName(BasicInputOutputTestCase):
    inputs = {
        'both': Person(family_name='Doe', given_name='Jane'),
        'family-only': Person(family_name='Doe'),
        'given-only': Person(given_name='Jane'),
        'neither': Person(),
        'empty-strings': Person(family_name='', given_name=''),
    }
    expected_outputs = {
        'both': 'Doe, Jane',
        'family-only': 'Doe',
        'given-only': 'Jane',
        'neither': 'Unknown',
        'empty-strings': 'Unknown',
    }

    def compute_output(self, given_input):
        return format_person_name(given_input)


class TestDateValue(BasicInputOutputTestCase):
    inputs = {
        'closed-range': ClosedRange('2020-01-01', '2020-12-31'),
        'open-start': OpenEndedRange(start='2020-01-01'),
        'open-end': OpenEndedRange(end='2020-12-31'),
        'single': Single('2024-05-06'),
        'single-empty': Single(''),
        'single-none': Single(None),
    }
    expected_outputs = {
        'closed-range': '2020-01-01/2020-12-31',
        'open-start': '2020-01-01',
        'open-end': '2020-12-31',
        'single': '2024-05-06',
        'single-empty': None,
        'single-none': None,
    }

    def compute_output(self, given_input):
        return format_date_value(ResourceDate('Other', given_input))


class TestGeolocation(BasicInputOutputTestCase):
    inputs = {
        'point': GeoLocation(Point(13.06, 52.38), place='Potsdam'),
        'partial-point': GeoLocation(Point(13.06, None)),
        'box': GeoLocation(Box(1, 2, 3, 4)),
        'partial-box': GeoLocation(Box(1, 2, None, 4)),
        'triangle': GeoLocation(Polygon([Point(0, 0), Point(1, 0), Point(0, 1)])),
        'two-points': GeoLocation(Polygon([Point(0, 0), Point(1, 0)]), place='a line'),
        'no-points': GeoLocation(Polygon([])),
        'partial-in-point': GeoLocation(Polygon(
            [Point(0, 0), Point(1, 0), Point(0, 1)],
            in_polygon_point=Point(0.25, None),
        )),
        'place-only': GeoLocation(None, place='Somewhere'),
    }
    expected_outputs = {
        'point': {
            'geoLocationPlace': 'Potsdam',
            'geoLocationPoint': {'pointLongitude': 13.06, 'pointLatitude': 52.38},
        },
        'partial-point': None,
        'box': {
            'geoLocationBox': {
                'westBoundLongitude': 1,
                'eastBoundLongitude': 2,
                'southBoundLatitude': 3,
                'northBoundLatitude': 4,
            },
        },
        'partial-box': None,
        'triangle': {
            'geoLocationPolygon': {
                'polygonPoints': [
                    {'pointLongitude': 0, 'pointLatitude': 0},
                    {'pointLongitude': 1, 'pointLatitude': 0},
                    {'pointLongitude': 0, 'pointLatitude': 1},
                ],
            },
        },
        'two-points': None,
        'no-points': None,
        'partial-in-point': {
            'geoLocationPolygon': {
                'polygonPoints': [
                    {'pointLongitude': 0, 'pointLatitude': 0},
                    {'pointLongitude': 1, 'pointLatitude': 0},
                    {'pointLongitude': 0, 'pointLatitude': 1},
                ],
            },
        },
        'place-only': None,
    }

    def compute_output(self, given_input):
        return canonical_geolocation(given_input)


class TestAgents(TestCase):
    def test_person_creator(self):
        _creator = Creator(
            Person(family_name='Doe', given_name='Jane', name_identifier='0000-0002-1825-0097'),
            affiliations=[Affiliation('GFZ')],
        )
        self.assertEqual(canonical_creator(_creator), {
            'name': 'Doe, Jane',
            'nameType': 'Personal',
            'givenName': 'Jane',
            'familyName': 'Doe',
            'nameIdentifiers': [{
                'nameIdentifier': '0000-0002-1825-0097',
                'nameIdentifierScheme': 'ORCID',
                'schemeURI': 'https://orcid.org',
            }],
            'affiliation': [{'name': 'GFZ'}],
        })

    def test_institution_creator(self):
        _creator = Creator(Institution('GFZ', name_identifier='https://ror.org/04z8jg394'))
        self.assertEqual(canonical_creator(_creator), {
            'name': 'GFZ',
            'nameType': 'Organizational',
            'nameIdentifiers': [{
                'nameIdentifier': 'https://ror.org/04z8jg394',
                'nameIdentifierScheme': 'ROR',
                'schemeURI': 'https://ror.org',
            }],
        })

    def test_institution_without_identifier(self):
        _fields = canonical_creator(Creator(Institution('Some Institute')))
        self.assertNotIn('nameIdentifiers', _fields)
        self.assertNotIn('givenName', _fields)
        self.assertNotIn('familyName', _fields)

    def test_unsupported_agent(self):
        # model constructors refuse other agents; pretend one got through anyway
        _sneaky = mock.Mock(agent=object(), affiliations=(), position=0)
        with self.assertRaises(kernel_exceptions.UnsupportedAgentKind):
            canonical_creator(_sneaky)
        with self.assertRaises(kernel_exceptions.UnsupportedAgentKind):
            canonical_contributor(_sneaky)

    def test_contributor(self):
        _contributor = Contributor(
            Person(family_name='Roe'),
            contributor_type='DataCurator',
            affiliations=[Affiliation('Uni', identifier='https://ror.org/0', identifier_scheme='ROR')],
        )
        _fields = canonical_contributor(_contributor)
        self.assertEqual(list(_fields.keys())[:3], ['name', 'nameType', 'contributorType'])
        self.assertEqual(_fields['contributorType'], 'DataCurator')
        self.assertEqual(_fields['affiliation'], [{
            'name': 'Uni',
            'affiliationIdentifier': 'https://ror.org/0',
            'affiliationIdentifierScheme': 'ROR',
        }])

    def test_contributor_defaults(self):
        _fields = canonical_contributor(Contributor(Institution('Some Institute')))
        self.assertEqual(_fields['contributorType'], 'Other')

    def test_laboratory(self):
        _lab = Institution('Rock Lab', name_identifier='abc', is_laboratory=True)
        _fields = canonical_contributor(Contributor(_lab, contributor_type='Other'))
        self.assertEqual(_fields, {
            'name': 'Rock Lab',
            'nameType': 'Organizational',
            'contributorType': 'HostingInstitution',
            'nameIdentifiers': [{'nameIdentifier': 'abc', 'nameIdentifierScheme': 'labid'}],
        })

    def test_institution_without_name(self):
        for (_agent, _expected_name) in (
            (Institution(''), 'Unknown Institution'),
            (Institution('   '), 'Unknown Institution'),
            (Institution(None), 'Unknown Institution'),
            (Institution('', is_laboratory=True), 'Unknown Laboratory'),
        ):
            with self.subTest(agent=_agent):
                self.assertEqual(canonical_contributor(Contributor(_agent))['name'], _expected_name)
                self.assertEqual(canonical_creator(Creator(_agent))['name'], _expected_name)

    def test_name_identifier_schemes(self):
        self.assertIsNone(canonical_name_identifier(None, 'ORCID', default_scheme='ORCID'))
        self.assertIsNone(canonical_name_identifier('', 'ORCID', default_scheme='ORCID'))
        self.assertEqual(canonical_name_identifier('0000', None, default_scheme='ORCID'), {
            'nameIdentifier': '0000',
            'nameIdentifierScheme': 'ORCID',
            'schemeURI': 'https://orcid.org',
        })
        self.assertEqual(canonical_name_identifier('000000012146438X', 'ISNI', default_scheme='ORCID'), {
            'nameIdentifier': '000000012146438X',
            'nameIdentifierScheme': 'ISNI',
            'schemeURI': 'https://isni.org',
        })
        with self.assertLogs('doikernel.canonical', level='DEBUG'):
            _unknown = canonical_name_identifier('Q42', 'Wikidata', default_scheme='ORCID')
        self.assertEqual(_unknown['schemeURI'], '')


class TestFunding(TestCase):
    def test_funder_name_only(self):
        self.assertEqual(
            canonical_funding_reference(FundingReference('DFG')),
            {'funderName': 'DFG'},
        )

    def test_identifier_group(self):
        self.assertEqual(
            canonical_funding_reference(FundingReference('DFG', funder_identifier='https://doi.org/10.13039/501100001659')),
            {
                'funderName': 'DFG',
                'funderIdentifier': 'https://doi.org/10.13039/501100001659',
                'funderIdentifierType': 'Other',
            },
        )

    def test_scheme_uri_needs_identifier(self):
        _fields = canonical_funding_reference(FundingReference('DFG', scheme_uri='https://ror.org', award_title='x'))
        self.assertEqual(_fields, {'funderName': 'DFG', 'awardTitle': 'x'})


class TestCanonicalize(TestCase):
    def setUp(self):
        _patcher = mock.patch.object(settings, 'DEFAULT_PUBLISHER', 'Fallback Publisher')
        _patcher.start()
        self.addCleanup(_patcher.stop)

    def test_fallbacks(self):
        _doc = canonicalize(Resource())
        self.assertEqual(list(_doc.keys()), ['creators', 'titles', 'publisher', 'resourceType'])
        self.assertEqual(_doc['creators'], ({'name': 'Unknown', 'nameType': 'Personal'},))
        self.assertEqual(_doc['titles'], ({'title': 'Untitled'},))
        self.assertEqual(_doc['publisher'], {'name': 'Fallback Publisher'})
        self.assertEqual(_doc['resourceType'], {'resourceTypeGeneral': 'Other', 'resourceType': 'Other'})

    def test_read_only(self):
        _doc = canonicalize(DERIVER_TEST_RESOURCES['everything'])
        with self.assertRaises(TypeError):
            _doc['version'] = '2.0'  # type: ignore[index]
        with self.assertRaises(TypeError):
            _doc['titles'][0]['title'] = 'changed'
        self.assertIsInstance(_doc['creators'], tuple)

    def test_schema_order(self):
        for _name, _resource in DERIVER_TEST_RESOURCES.items():
            with self.subTest(name=_name):
                _keys = list(canonicalize(_resource).keys())
                self.assertEqual(_keys, [_key for _key in KERNEL_ELEMENT_ORDER if _key in _keys])

    def test_empty_collections_left_out(self):
        _doc = canonicalize(Resource(
            titles=[Title('t')],
            sizes=['', ''],
            dates=[ResourceDate.from_fields('Created')],
            geo_locations=[GeoLocation(None, place='nowhere')],
        ))
        for _absent in ('sizes', 'dates', 'geoLocations', 'subjects', 'contributors', 'version', 'language'):
            self.assertNotIn(_absent, _doc)

    def test_position_order(self):
        _doc = canonicalize(Resource(creators=[
            Creator(Person(family_name='C'), position=3),
            Creator(Person(family_name='A'), position=1),
            Creator(Person(family_name='B'), position=1),
        ]))
        self.assertEqual([_creator['name'] for _creator in _doc['creators']], ['A', 'B', 'C'])

    def test_language_propagation(self):
        _doc = canonicalize(Resource(
            language='de',
            publisher=Publisher('GFZ'),
            titles=[Title('Titel'), Title('Title', title_type='translated-title', language='en')],
            subjects=[Subject('Geologie')],
            rights=[Rights('CC BY 4.0', identifier='CC-BY-4.0')],
        ))
        self.assertEqual([_title.get('lang') for _title in _doc['titles']], ['de', 'en'])
        self.assertEqual(_doc['publisher']['lang'], 'de')
        self.assertEqual(_doc['rightsList'][0]['lang'], 'de')
        self.assertEqual(_doc['rightsList'][0]['rightsIdentifierScheme'], 'SPDX')
        self.assertNotIn('lang', _doc['subjects'][0])

    def test_resource_type(self):
        _doc = canonicalize(Resource(resource_type='Physical Object'))
        self.assertEqual(_doc['resourceType'], {
            'resourceTypeGeneral': 'PhysicalObject',
            'resourceType': 'Physical Object',
        })

    def test_polygon_too_small(self):
        _doc = canonicalize(Resource(geo_locations=[
            GeoLocation(Polygon([Point(0, 0), Point(1, 1)]), place='a line'),
        ]))
        self.assertNotIn('geoLocations', _doc)

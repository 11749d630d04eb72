'''fixed vocabulary of the datacite metadata kernel (4.x)

see https://datacite-metadata-schema.readthedocs.io/en/4.6/
'''
import types


# order of top-level elements in a kernel-4 xml <resource>
KERNEL_ELEMENT_ORDER = (
    'identifier',
    'creators',
    'titles',
    'publisher',
    'publicationYear',
    'resourceType',
    'subjects',
    'contributors',
    'dates',
    'language',
    'alternateIdentifiers',
    'relatedIdentifiers',
    'sizes',
    'formats',
    'version',
    'rightsList',
    'descriptions',
    'geoLocations',
    'fundingReferences',
)

NAME_TYPE_PERSONAL = 'Personal'
NAME_TYPE_ORGANIZATIONAL = 'Organizational'

DEFAULT_PERSON_SCHEME = 'ORCID'
DEFAULT_INSTITUTION_SCHEME = 'ROR'
DEFAULT_AFFILIATION_SCHEME = 'ROR'
DEFAULT_LABORATORY_SCHEME = 'labid'
DEFAULT_FUNDER_IDENTIFIER_TYPE = 'Other'
DEFAULT_RESOURCE_TYPE = 'Other'
DEFAULT_DESCRIPTION_TYPE = 'Abstract'
DEFAULT_CONTRIBUTOR_TYPE = 'Other'
DEFAULT_RELATED_IDENTIFIER_TYPE = 'DOI'
DEFAULT_RELATION_TYPE = 'References'
LABORATORY_CONTRIBUTOR_TYPE = 'HostingInstitution'
RIGHTS_IDENTIFIER_SCHEME = 'SPDX'

UNKNOWN_PERSON_NAME = 'Unknown'
UNKNOWN_INSTITUTION_NAME = 'Unknown Institution'
UNKNOWN_LABORATORY_NAME = 'Unknown Laboratory'
UNTITLED = 'Untitled'

# name-identifier scheme => scheme uri (keys upper-case)
SCHEME_URIS = types.MappingProxyType({
    'ORCID': 'https://orcid.org',
    'ROR': 'https://ror.org',
    'ISNI': 'https://isni.org',
    'GRID': 'https://www.grid.ac',
})

# title-type slugs (as stored) => kernel titleType
TITLE_TYPES = types.MappingProxyType({
    'alternative-title': 'AlternativeTitle',
    'subtitle': 'Subtitle',
    'translated-title': 'TranslatedTitle',
    'other': 'Other',
})
MAIN_TITLE_SLUGS = frozenset(('main-title', 'maintitle', 'main'))

# resource-type display names => kernel resourceTypeGeneral
RESOURCE_TYPE_GENERAL = types.MappingProxyType({
    'Audiovisual': 'Audiovisual',
    'Award': 'Award',
    'Book': 'Book',
    'Book Chapter': 'BookChapter',
    'Collection': 'Collection',
    'Computational Notebook': 'ComputationalNotebook',
    'Conference Paper': 'ConferencePaper',
    'Conference Proceeding': 'ConferenceProceeding',
    'Data Paper': 'DataPaper',
    'Dataset': 'Dataset',
    'Dissertation': 'Dissertation',
    'Event': 'Event',
    'Image': 'Image',
    'Interactive Resource': 'InteractiveResource',
    'Instrument': 'Instrument',
    'Journal': 'Journal',
    'Journal Article': 'JournalArticle',
    'Model': 'Model',
    'Output Management Plan': 'OutputManagementPlan',
    'Peer Review': 'PeerReview',
    'Physical Object': 'PhysicalObject',
    'Preprint': 'Preprint',
    'Project': 'Project',
    'Report': 'Report',
    'Service': 'Service',
    'Software': 'Software',
    'Sound': 'Sound',
    'Standard': 'Standard',
    'Study Registration': 'StudyRegistration',
    'Text': 'Text',
    'Workflow': 'Workflow',
    'Other': 'Other',
})


def scheme_uri(scheme: str) -> str:
    '''
    >>> scheme_uri('orcid')
    'https://orcid.org'
    >>> scheme_uri('GRID')
    'https://www.grid.ac'
    >>> scheme_uri('labid')
    ''
    '''
    return SCHEME_URIS.get(scheme.upper(), '')


def title_type(slug: str | None) -> str | None:
    '''kernel titleType for a stored title-type slug (None for main titles)

    >>> title_type('alternative-title')
    'AlternativeTitle'
    >>> title_type('TranslatedTitle')
    'TranslatedTitle'
    >>> title_type('main-title') is None
    True
    >>> title_type('whatever')
    'Other'
    '''
    if not slug or slug.lower() in MAIN_TITLE_SLUGS:
        return None
    if slug in TITLE_TYPES.values():
        return slug
    return TITLE_TYPES.get(slug.lower(), 'Other')


def resource_type_general(type_name: str | None) -> str:
    '''
    >>> resource_type_general('Journal Article')
    'JournalArticle'
    >>> resource_type_general('Some New Thing')
    'SomeNewThing'
    >>> resource_type_general(None)
    'Other'
    '''
    if not type_name:
        return DEFAULT_RESOURCE_TYPE
    return RESOURCE_TYPE_GENERAL.get(type_name, type_name.replace(' ', ''))

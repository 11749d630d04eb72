from .agents import (
    AgentKind,
    Affiliation,
    Contributor,
    Creator,
    Institution,
    Person,
    agent_kind_from_fields,
)
from .dates import (
    ClosedRange,
    DateShape,
    OpenEndedRange,
    ResourceDate,
    Single,
    date_shape_from_fields,
)
from .geo import (
    Box,
    GeoLocation,
    GeoShape,
    Point,
    Polygon,
    geo_shape_from_fields,
)
from .resource import (
    AlternateIdentifier,
    Description,
    FundingReference,
    Publisher,
    RelatedIdentifier,
    Resource,
    Rights,
    Subject,
    Title,
)

__all__ = (
    'Affiliation',
    'AgentKind',
    'AlternateIdentifier',
    'Box',
    'ClosedRange',
    'Contributor',
    'Creator',
    'DateShape',
    'Description',
    'FundingReference',
    'GeoLocation',
    'GeoShape',
    'Institution',
    'OpenEndedRange',
    'Person',
    'Point',
    'Polygon',
    'Publisher',
    'RelatedIdentifier',
    'Resource',
    'ResourceDate',
    'Rights',
    'Single',
    'Subject',
    'Title',
    'agent_kind_from_fields',
    'date_shape_from_fields',
    'geo_shape_from_fields',
)

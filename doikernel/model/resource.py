from __future__ import annotations
import dataclasses

from .agents import Contributor, Creator
from .dates import ResourceDate
from .geo import GeoLocation


@dataclasses.dataclass(frozen=True)
class Title:
    value: str
    title_type: str | None = None  # stored slug; None (or a main-title slug) for the main title
    language: str | None = None


@dataclasses.dataclass(frozen=True)
class Description:
    value: str
    description_type: str | None = None
    language: str | None = None


@dataclasses.dataclass(frozen=True)
class Subject:
    value: str
    subject_scheme: str | None = None
    scheme_uri: str | None = None
    value_uri: str | None = None
    classification_code: str | None = None
    language: str | None = None


@dataclasses.dataclass(frozen=True)
class Rights:
    name: str
    identifier: str | None = None  # spdx license id
    uri: str | None = None
    scheme_uri: str | None = None
    language: str | None = None


@dataclasses.dataclass(frozen=True)
class RelatedIdentifier:
    identifier: str
    identifier_type: str | None = None
    relation_type: str | None = None
    resource_type_general: str | None = None
    related_metadata_scheme: str | None = None
    scheme_uri: str | None = None
    scheme_type: str | None = None
    position: int = 0


@dataclasses.dataclass(frozen=True)
class AlternateIdentifier:
    value: str
    identifier_type: str


@dataclasses.dataclass(frozen=True)
class FundingReference:
    funder_name: str
    funder_identifier: str | None = None
    funder_identifier_type: str | None = None
    scheme_uri: str | None = None
    award_number: str | None = None
    award_uri: str | None = None
    award_title: str | None = None


@dataclasses.dataclass(frozen=True)
class Publisher:
    name: str
    identifier: str | None = None
    identifier_scheme: str | None = None
    scheme_uri: str | None = None
    language: str | None = None


_COLLECTION_FIELDS = (
    'titles',
    'creators',
    'contributors',
    'descriptions',
    'dates',
    'subjects',
    'geo_locations',
    'rights',
    'related_identifiers',
    'alternate_identifiers',
    'funding_references',
    'sizes',
    'formats',
)


@dataclasses.dataclass(frozen=True)
class Resource:
    '''a fully loaded resource, as exported at publication/registration time

    every collection is present (possibly empty); storage order is kept
    except for creators, contributors and related identifiers, which are
    exported by `position`
    '''
    doi: str | None = None
    publication_year: int | str | None = None
    version: str | None = None
    resource_type: str | None = None  # display name, e.g. "Journal Article"
    language: str | None = None
    publisher: Publisher | None = None
    titles: tuple[Title, ...] = ()
    creators: tuple[Creator, ...] = ()
    contributors: tuple[Contributor, ...] = ()
    descriptions: tuple[Description, ...] = ()
    dates: tuple[ResourceDate, ...] = ()
    subjects: tuple[Subject, ...] = ()
    geo_locations: tuple[GeoLocation, ...] = ()
    rights: tuple[Rights, ...] = ()
    related_identifiers: tuple[RelatedIdentifier, ...] = ()
    alternate_identifiers: tuple[AlternateIdentifier, ...] = ()
    funding_references: tuple[FundingReference, ...] = ()
    sizes: tuple[str, ...] = ()
    formats: tuple[str, ...] = ()

    def __post_init__(self):
        for _field_name in _COLLECTION_FIELDS:
            object.__setattr__(self, _field_name, tuple(getattr(self, _field_name)))

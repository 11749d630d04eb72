from __future__ import annotations
from collections.abc import Iterable
import dataclasses
import typing

from doikernel import exceptions as kernel_exceptions


@dataclasses.dataclass(frozen=True)
class Affiliation:
    name: str
    identifier: str | None = None
    identifier_scheme: str | None = None
    scheme_uri: str | None = None


@dataclasses.dataclass(frozen=True)
class Person:
    family_name: str | None = None
    given_name: str | None = None
    name_identifier: str | None = None
    name_identifier_scheme: str | None = None


@dataclasses.dataclass(frozen=True)
class Institution:
    name: str
    name_identifier: str | None = None
    name_identifier_scheme: str | None = None
    # laboratories are always exported as hosting institutions
    is_laboratory: bool = False


type AgentKind = Person | Institution


def agent_kind_from_fields(
    *,
    person: Person | None = None,
    institution: Institution | None = None,
) -> AgentKind:
    '''resolve the person-or-institution side of a creator/contributor row

    exactly one must be given, and it must have a name: at least one name
    part for a person, a non-blank name for an institution
    '''
    match (person, institution):
        case (Person() as _person, None):
            if not (_person.family_name or _person.given_name):
                raise kernel_exceptions.InvalidAgent(f'person has neither family nor given name: {_person!r}')
            return _person
        case (None, Institution() as _institution):
            if not (_institution.name and _institution.name.strip()):
                raise kernel_exceptions.InvalidAgent(f'institution has no name: {_institution!r}')
            return _institution
        case _:
            raise kernel_exceptions.InvalidAgent(
                'expected exactly one of person or institution'
                f' (got person={person!r}, institution={institution!r})'
            )


def _check_agent(agent: typing.Any) -> None:
    if not isinstance(agent, (Person, Institution)):
        raise kernel_exceptions.InvalidAgent(f'expected a Person or an Institution, got {agent!r}')


@dataclasses.dataclass(frozen=True)
class Creator:
    agent: AgentKind
    affiliations: tuple[Affiliation, ...] = ()
    position: int = 0

    def __post_init__(self):
        _check_agent(self.agent)
        object.__setattr__(self, 'affiliations', tuple(self.affiliations))

    @classmethod
    def from_fields(
        cls,
        *,
        person: Person | None = None,
        institution: Institution | None = None,
        affiliations: Iterable[Affiliation] = (),
        position: int = 0,
    ) -> typing.Self:
        return cls(
            agent=agent_kind_from_fields(person=person, institution=institution),
            affiliations=tuple(affiliations),
            position=position,
        )


@dataclasses.dataclass(frozen=True)
class Contributor:
    agent: AgentKind
    contributor_type: str | None = None
    affiliations: tuple[Affiliation, ...] = ()
    position: int = 0

    def __post_init__(self):
        _check_agent(self.agent)
        object.__setattr__(self, 'affiliations', tuple(self.affiliations))

    @classmethod
    def from_fields(
        cls,
        *,
        contributor_type: str | None = None,
        person: Person | None = None,
        institution: Institution | None = None,
        affiliations: Iterable[Affiliation] = (),
        position: int = 0,
    ) -> typing.Self:
        return cls(
            agent=agent_kind_from_fields(person=person, institution=institution),
            contributor_type=contributor_type,
            affiliations=tuple(affiliations),
            position=position,
        )

"""A person assembled through separate address and job builders."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Person:
    """Where someone lives and works."""

    street_address: str = ""
    postcode: str = ""
    city: str = ""
    company: str = ""
    position: str = ""
    annual_income: str = ""

    def introduce(self) -> str:
        return (
            f"I live at {self.street_address}, {self.postcode}, {self.city} "
            f"and I work at {self.company} as a {self.position} "
            f"and I earn {self.annual_income}"
        )


class PersonBuilder:
    """Root builder; switch facets with lives() and works()."""

    def __init__(self, person: Person | None = None) -> None:
        self.person = person if person is not None else Person()

    def lives(self) -> PersonAddressBuilder:
        return PersonAddressBuilder(self.person)

    def works(self) -> PersonJobBuilder:
        return PersonJobBuilder(self.person)

    def build(self) -> Person:
        return self.person


class PersonAddressBuilder(PersonBuilder):
    """Sets the address facet."""

    def at(self, street_address: str) -> PersonAddressBuilder:
        self.person.street_address = street_address
        return self

    def in_(self, city: str) -> PersonAddressBuilder:
        self.person.city = city
        return self

    def with_post_code(self, postcode: str) -> PersonAddressBuilder:
        self.person.postcode = postcode
        return self


class PersonJobBuilder(PersonBuilder):
    """Sets the job facet."""

    def at(self, company: str) -> PersonJobBuilder:
        self.person.company = company
        return self

    def as_a(self, position: str) -> PersonJobBuilder:
        self.person.position = position
        return self

    def earning(self, annual_income: str) -> PersonJobBuilder:
        self.person.annual_income = annual_income
        return self


def demo() -> None:
    """Build a person through both facets and introduce them."""
    pb = PersonBuilder()
    (
        pb.lives()
        .at("212 Baker Street")
        .in_("London")
        .with_post_code("SW12BC")
        .works()
        .at("Zapcom")
        .as_a("Software Engineer")
        .earning("Nothing")
    )
    print(pb.build().introduce())
"""Tests for the in-memory filter predicates."""

from __future__ import annotations

from datetime import date

from vetportal.application.listing import (
    Between,
    Contains,
    DateBetween,
    Equals,
    EqualsIgnoreCase,
    FilterSpec,
    PetFilters,
    SearchAny,
    evaluate,
    pet_filter_spec,
)
from vetportal.infrastructure.gateways.fixtures import fixture_pets


def test_empty_spec_returns_every_entity_in_order() -> None:
    pets = fixture_pets()

    assert evaluate(pets, {}) == pets
    assert evaluate(pets, None) == pets
    assert evaluate(pets, FilterSpec()) == pets


def test_type_filter_keeps_matching_pets_in_order() -> None:
    result = evaluate(fixture_pets(), {"type": "Dog", "is_active": True})

    assert [pet.name for pet in result] == ["Buddy", "Rex"]


def test_pet_filters_on_type_only() -> None:
    result = evaluate(fixture_pets(), pet_filter_spec(PetFilters(type="Dog")))

    assert [pet.name for pet in result] == ["Buddy", "Rex", "Shadow"]


def test_unset_clauses_do_not_constrain() -> None:
    spec = FilterSpec.of(
        Equals("type", None),
        Equals("breed", ""),
        Between("age", None, None),
        DateBetween("registration_date", None, None),
        SearchAny(("name",), ""),
    )

    assert spec.is_empty
    assert evaluate(fixture_pets(), spec) == fixture_pets()


def test_boolean_equality_does_not_match_truthy_values() -> None:
    entities = [{"is_active": 1}, {"is_active": True}, {"is_active": "true"}]

    assert evaluate(entities, FilterSpec.of(Equals("is_active", True))) == [{"is_active": True}]


def test_between_is_inclusive_and_skips_non_numbers() -> None:
    entities = [{"age": 2}, {"age": 5}, {"age": 7}, {"age": "5"}, {}]

    result = evaluate(entities, FilterSpec.of(Between("age", 2, 5)))

    assert result == [{"age": 2}, {"age": 5}]


def test_date_range_accepts_dates_and_timestamps() -> None:
    entities = [
        {"date": "2024-01-01"},
        {"date": "2024-01-15T10:30:00"},
        {"date": "2024-02-01"},
        {"date": "not a date"},
    ]

    result = evaluate(
        entities, FilterSpec.of(DateBetween("date", date(2024, 1, 1), "2024-01-31"))
    )

    assert result == [{"date": "2024-01-01"}, {"date": "2024-01-15T10:30:00"}]


def test_contains_is_case_insensitive() -> None:
    entities = [{"docname": "Dr. Sarah Johnson"}, {"docname": "Dr. Mike Wilson"}]

    result = evaluate(entities, FilterSpec.of(Contains("docname", "sarah")))

    assert result == [{"docname": "Dr. Sarah Johnson"}]


def test_free_text_search_covers_name_and_email() -> None:
    owners = [
        {"name": "John Doe", "email": "john.doe@example.com"},
        {"name": "Jane Smith", "email": "jane.smith@example.com"},
        {"name": "Bob Johnson", "email": "bob@example.com"},
    ]
    spec = FilterSpec.from_mapping({"search": "JOHN"}, search_fields=("name", "email"))

    result = evaluate(owners, spec)

    assert [owner["name"] for owner in result] == ["John Doe", "Bob Johnson"]


def test_search_decides_the_outcome_when_last() -> None:
    entities = [
        {"name": "Buddy", "type": "Dog"},
        {"name": "Buddy", "type": "Cat"},
    ]
    spec = FilterSpec.from_mapping(
        {"search": "bud", "type": "Dog"}, search_fields=("name",)
    )

    assert [clause.__class__ for clause in spec.clauses] == [Equals, SearchAny]
    assert evaluate(entities, spec) == [{"name": "Buddy", "type": "Dog"}]


def test_missing_fields_fail_the_clause_without_raising() -> None:
    entities = [{"name": "Buddy"}, object()]

    assert evaluate(entities, FilterSpec.of(Equals("type", "Dog"))) == []


def test_equality_filter_on_plain_records() -> None:
    entities = [
        {"name": "Buddy", "type": "Dog"},
        {"name": "Milo", "type": "Cat"},
        {"name": "Rex", "type": "Dog"},
    ]

    result = evaluate(entities, {"type": "Dog"})

    assert result == [{"name": "Buddy", "type": "Dog"}, {"name": "Rex", "type": "Dog"}]


def test_pet_search_matches_the_owner_display_name() -> None:
    pets = fixture_pets()
    expected = [pet.name for pet in pets if pet.owner_name == "Bob Johnson"]

    result = evaluate(pets, pet_filter_spec(PetFilters(search="bob johnson")))

    assert expected
    assert [pet.name for pet in result] == expected


def test_case_insensitive_equality_requires_the_whole_value() -> None:
    entities = [
        {"email": "Jane@Example.com"},
        {"email": "mary.jane@example.com"},
        {"email": None},
    ]

    result = evaluate(entities, FilterSpec.of(EqualsIgnoreCase("email", "jane@example.com")))

    assert result == [{"email": "Jane@Example.com"}]

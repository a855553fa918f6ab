"""Tests for the property catalog and lookup."""

from __future__ import annotations

import threading

import pytest

from sessionprops import catalog as catalog_module
from sessionprops.catalog import SESSION_PROPERTIES, PropertyCatalog, lookup, required_keys
from sessionprops.errors import CatalogError
from sessionprops.models import PropertyDefinition, ValueKind


@pytest.mark.parametrize("definition", list(SESSION_PROPERTIES), ids=lambda d: d.key)
def test_lookup_ignores_case_of_canonical_keys(definition: PropertyDefinition) -> None:
    key = definition.key

    assert lookup(key) is definition
    assert lookup(key.lower()) is definition
    assert lookup(key.upper()) is definition


def test_lookup_resolves_aliases() -> None:
    database = lookup("database")

    assert database is not None
    assert lookup("db") is database
    assert lookup("DB") is database


def test_every_alias_resolves_to_its_owner() -> None:
    for definition in SESSION_PROPERTIES:
        for alias in definition.aliases:
            assert lookup(alias) is definition


def test_lookup_returns_none_for_unknown_names() -> None:
    assert lookup("does-not-exist") is None
    assert lookup("") is None


def test_names_are_globally_unique() -> None:
    seen: dict[str, str] = {}
    for definition in SESSION_PROPERTIES:
        for name in definition.names():
            folded = name.lower()
            assert folded not in seen, f"{name} collides with {seen[folded]}"
            seen[folded] = definition.key


def test_required_keys_match_required_flags() -> None:
    expected = {definition.key for definition in SESSION_PROPERTIES if definition.required}

    assert required_keys() == expected
    assert required_keys() == {"serverURL", "account"}


def test_required_keys_do_not_depend_on_order() -> None:
    reversed_catalog = PropertyCatalog(tuple(reversed(tuple(SESSION_PROPERTIES))))

    assert reversed_catalog.required_keys() == SESSION_PROPERTIES.required_keys()


def test_default_returns_shared_catalog() -> None:
    assert PropertyCatalog.default() is SESSION_PROPERTIES
    assert PropertyCatalog.default() is catalog_module.SESSION_PROPERTIES


def test_canonical_key_wins_over_alias() -> None:
    catalog = PropertyCatalog(
        [
            PropertyDefinition("alpha", False, ValueKind.TEXT, ("shortcut",)),
            PropertyDefinition("beta", False, ValueKind.TEXT),
        ]
    )

    assert catalog.lookup("ALPHA").key == "alpha"
    assert catalog.lookup("Shortcut").key == "alpha"
    assert catalog.lookup("beta").key == "beta"


@pytest.mark.parametrize(
    "definitions",
    [
        (
            PropertyDefinition("alpha", False, ValueKind.TEXT),
            PropertyDefinition("ALPHA", False, ValueKind.TEXT),
        ),
        (
            PropertyDefinition("alpha", False, ValueKind.TEXT, ("a",)),
            PropertyDefinition("beta", False, ValueKind.TEXT, ("A",)),
        ),
        (
            PropertyDefinition("alpha", False, ValueKind.TEXT, ("beta",)),
            PropertyDefinition("beta", False, ValueKind.TEXT),
        ),
        (PropertyDefinition("alpha", False, ValueKind.TEXT, ("Alpha",)),),
    ],
)
def test_catalog_rejects_colliding_names(definitions: tuple[PropertyDefinition, ...]) -> None:
    with pytest.raises(CatalogError):
        PropertyCatalog(definitions)


def test_mapping_protocol_helpers() -> None:
    assert "DB" in SESSION_PROPERTIES
    assert "nope" not in SESSION_PROPERTIES
    assert 42 not in SESSION_PROPERTIES
    assert SESSION_PROPERTIES["db"].key == "database"
    assert len(SESSION_PROPERTIES) == len(SESSION_PROPERTIES.keys())
    assert SESSION_PROPERTIES.keys()[0] == "serverURL"
    with pytest.raises(KeyError):
        SESSION_PROPERTIES["nope"]


def test_only_private_key_is_opaque() -> None:
    opaque = [d.key for d in SESSION_PROPERTIES if d.kind is ValueKind.OPAQUE]

    assert opaque == ["privateKey"]


def test_application_carries_special_validator() -> None:
    with_validators = [d.key for d in SESSION_PROPERTIES if d.special_validator is not None]

    assert with_validators == ["application"]


def test_concurrent_lookups_see_same_definitions() -> None:
    results: list[PropertyDefinition | None] = []
    lock = threading.Lock()

    def _worker() -> None:
        found = [lookup(name) for name in ("serverURL", "db", "WAREHOUSE")]
        with lock:
            results.extend(found)

    threads = [threading.Thread(target=_worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 24
    assert {d.key for d in results if d is not None} == {"serverURL", "database", "warehouse"}

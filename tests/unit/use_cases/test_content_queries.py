from datetime import datetime

import pytest

from src.app.use_cases.content import (
    GetCityUseCase,
    GetCountryUseCase,
    GetPageUseCase,
    ListPagesUseCase,
    city_key_to_display_name,
)
from src.domain.entities import Entity, Page

NOW = datetime(2024, 5, 1, 12, 0, 0)


def make_entity(list_name, key, **fields):
    return Entity.from_document(list_name, key, fields, NOW)


@pytest.mark.parametrize(
    "key, expected",
    [
        ("den-haag", "Den Haag"),
        ("paris", "Paris"),
        ("portland-or", "Portland, OR"),
        ("new-york-ny", "New York, NY"),
        ("SAN--francisco", "San Francisco"),
        ("xi-an", "Xi, AN"),
        ("la", "La"),
        ("", ""),
        ("---", ""),
    ],
)
def test_city_key_to_display_name(key, expected):
    assert city_key_to_display_name(key) == expected


@pytest.mark.asyncio
async def test_list_pages(mock_uow):
    mock_uow.pages.list_all.return_value = [
        Page(key="museums", name="Museums", attributes={"icon": "🏛"}),
    ]

    result = await ListPagesUseCase(mock_uow).execute()

    assert result.value == {"pages": [{"key": "museums", "name": "Museums", "icon": "🏛"}]}


@pytest.mark.asyncio
async def test_get_page_with_entities(mock_uow):
    mock_uow.pages.get_by_key.return_value = Page(key="museums", name="Museums")
    mock_uow.entities.list_by_list_name.return_value = [make_entity("museums", "louvre", name="Louvre")]

    result = await GetPageUseCase(mock_uow).execute("museums")

    assert result.value["--info--"] == {"key": "museums", "name": "Museums"}
    assert [e["key"] for e in result.value["entities"]] == ["louvre"]
    mock_uow.entities.list_by_list_name.assert_awaited_once_with("museums")


@pytest.mark.asyncio
async def test_get_unknown_page(mock_uow):
    mock_uow.pages.get_by_key.return_value = None

    result = await GetPageUseCase(mock_uow).execute("nope")

    assert result.error.kind == "page_not_found"
    assert result.error.message == "No page found for key='nope'"


@pytest.mark.asyncio
async def test_country_is_hoisted(mock_uow):
    # Arrange
    mock_uow.entities.find_by_country.return_value = [
        make_entity("museums", "louvre", name="Louvre", country="FR"),
        make_entity("countries", "fr", name="France", country="FR"),
        make_entity("countries", "fr-2", name="France (dup)", country="FR"),
    ]

    # Act
    result = await GetCountryUseCase(mock_uow).execute("fr")

    # Assert
    mock_uow.entities.find_by_country.assert_awaited_once_with("FR")
    assert result.value["country"]["key"] == "fr"
    assert [e["key"] for e in result.value["entities"]] == ["louvre", "fr-2"]


@pytest.mark.asyncio
async def test_country_without_canonical_entity(mock_uow):
    mock_uow.entities.find_by_country.return_value = [
        make_entity("museums", "louvre", country="FR"),
    ]

    result = await GetCountryUseCase(mock_uow).execute("FR")

    assert result.value["country"] is None
    assert len(result.value["entities"]) == 1


@pytest.mark.asyncio
async def test_city_is_hoisted(mock_uow):
    mock_uow.entities.find_by_city.return_value = [
        make_entity("cities", "portland-or", name="Portland, OR"),
        make_entity("breweries", "b1", name="Brewery", city="Portland, OR"),
    ]

    result = await GetCityUseCase(mock_uow).execute("portland-or")

    mock_uow.entities.find_by_city.assert_awaited_once_with("Portland, OR")
    assert result.value["city"]["key"] == "portland-or"
    assert [e["key"] for e in result.value["entities"]] == ["b1"]


@pytest.mark.asyncio
async def test_city_key_without_name_is_bad_request(mock_uow):
    result = await GetCityUseCase(mock_uow).execute("--")

    assert result.error.kind == "bad_request"
    mock_uow.entities.find_by_city.assert_not_awaited()

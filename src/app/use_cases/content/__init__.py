"""
Content Use Cases

Read-only page, entity, country and city lookups, plus the admin-only
entity writes.
"""

from .list_pages_use_case import ListPagesUseCase
from .get_page_use_case import GetPageUseCase
from .get_entity_use_case import GetEntityUseCase
from .create_entity_use_case import CreateEntityUseCase
from .update_entity_use_case import UpdateEntityUseCase
from .get_country_use_case import GetCountryUseCase
from .get_city_use_case import GetCityUseCase, city_key_to_display_name

__all__ = [
    "ListPagesUseCase",
    "GetPageUseCase",
    "GetEntityUseCase",
    "CreateEntityUseCase",
    "UpdateEntityUseCase",
    "GetCountryUseCase",
    "GetCityUseCase",
    "city_key_to_display_name",
]

"""Tests for the in-memory city info repository."""
import pytest

from cityinfo.domain.entities.point_of_interest import PointOfInterest
from cityinfo.infrastructure.persistence.repositories.in_memory_city_info_repository import (
    InMemoryCityInfoRepository,
)


@pytest.fixture
def search_repository(search_store):
    return InMemoryCityInfoRepository(search_store)


class TestListCities:
    """Test filtering, ordering and pagination of cities."""

    async def test_ordered_by_name(self, repository):
        cities, metadata = await repository.list_cities(None, None, 1, 10)

        assert [c.name for c in cities] == ["Antwerp", "New York City", "Paris"]
        assert metadata.total_item_count == 3

    async def test_name_filter_is_exact(self, search_repository):
        """'Paris' must not match 'Paris 2'."""
        cities, metadata = await search_repository.list_cities("Paris", None, 1, 10)

        assert [c.name for c in cities] == ["Paris"]
        assert metadata.total_item_count == 1

    async def test_name_filter_is_trimmed(self, search_repository):
        cities, _ = await search_repository.list_cities("  Paris  ", None, 1, 10)
        assert [c.id for c in cities] == [1]

    async def test_blank_filters_are_ignored(self, search_repository):
        cities, metadata = await search_repository.list_cities("   ", "  ", 1, 10)
        assert metadata.total_item_count == 5
        assert len(cities) == 5

    async def test_search_matches_description(self, search_repository):
        """'bridge' matches London through its description only."""
        cities, _ = await search_repository.list_cities(None, "bridge", 1, 10)

        assert [c.name for c in cities] == ["London"]

    async def test_search_matches_name_and_skips_null_description(self, search_repository):
        cities, _ = await search_repository.list_cities(None, "Bridge", 1, 10)

        assert [c.name for c in cities] == ["Bridgetown"]

    async def test_filters_combine_with_and(self, search_repository):
        cities, _ = await search_repository.list_cities("Paris", "real", 1, 10)
        assert cities == []

        cities, _ = await search_repository.list_cities("Paris 2", "real", 1, 10)
        assert [c.id for c in cities] == [2]

    async def test_count_is_taken_before_pagination(self, search_repository):
        cities, metadata = await search_repository.list_cities(None, None, 2, 2)

        assert [c.name for c in cities] == ["London", "Paris"]
        assert metadata.total_item_count == 5
        assert metadata.total_page_count == 3

    async def test_page_beyond_range(self, search_repository):
        cities, metadata = await search_repository.list_cities(None, None, 10, 2)

        assert cities == []
        assert metadata.total_item_count == 5

    async def test_listed_cities_have_no_children(self, repository):
        cities, _ = await repository.list_cities(None, None, 1, 10)
        assert all(c.points_of_interest == [] for c in cities)


class TestGetCity:
    """Test single city lookups."""

    async def test_without_points_of_interest(self, repository):
        city = await repository.get_city(1, include_points_of_interest=False)

        assert city.name == "New York City"
        assert city.points_of_interest == []

    async def test_with_points_of_interest(self, repository):
        city = await repository.get_city(1, include_points_of_interest=True)

        assert [p.id for p in city.points_of_interest] == [1, 2]
        assert all(p.city_id == city.id for p in city.points_of_interest)

    async def test_missing_city(self, repository):
        assert await repository.get_city(42) is None

    async def test_city_exists(self, repository):
        assert await repository.city_exists(2) is True
        assert await repository.city_exists(42) is False

    async def test_returned_city_is_detached(self, repository):
        city = await repository.get_city(1, include_points_of_interest=True)
        city.points_of_interest.clear()

        again = await repository.get_city(1, include_points_of_interest=True)
        assert len(again.points_of_interest) == 2


class TestPointsOfInterest:
    """Test child lookups and mutations."""

    async def test_get_scoped_to_city(self, repository):
        point_of_interest = await repository.get_point_of_interest(3, 5)
        assert point_of_interest.name == "Eiffel Tower"

    async def test_get_with_wrong_city_is_absent(self, repository):
        """Point of interest 5 belongs to Paris, not New York."""
        assert await repository.get_point_of_interest(1, 5) is None

    async def test_list_for_missing_city_is_empty(self, repository):
        assert await repository.list_points_of_interest(42) == []

    async def test_list_for_city(self, repository):
        points_of_interest = await repository.list_points_of_interest(2)
        assert [p.name for p in points_of_interest] == ["Cathedral of Our Lady", "Antwerp Central Station"]

    async def test_max_id(self, repository, empty_store):
        assert await repository.get_max_point_of_interest_id() == 6
        assert await InMemoryCityInfoRepository(empty_store).get_max_point_of_interest_id() is None

    async def test_add_to_missing_city_reports_absence(self, repository, store):
        orphan = PointOfInterest(id=7, city_id=42, name="Nowhere")

        assert await repository.add_point_of_interest(42, orphan) is None
        assert store.find_point_of_interest(7) is None

    async def test_add_duplicate_id_rejected(self, repository):
        with pytest.raises(ValueError):
            await repository.add_point_of_interest(1, PointOfInterest(id=5, city_id=1, name="Dup"))

    @pytest.mark.parametrize("name", ["", "   "])
    async def test_add_rejects_blank_name(self, repository, store, name):
        with pytest.raises(ValueError):
            await repository.add_point_of_interest(1, PointOfInterest(id=7, city_id=1, name=name))
        assert store.find_point_of_interest(7) is None

    async def test_add_then_read(self, repository, sample_point_of_interest):
        await repository.add_point_of_interest(1, sample_point_of_interest)

        found = await repository.get_point_of_interest(1, 99)
        assert found == sample_point_of_interest

    async def test_detached_entity_needs_update(self, repository, store):
        point_of_interest = await repository.get_point_of_interest(1, 1)
        point_of_interest.name = "Renamed"
        assert store.find_point_of_interest(1).name == "Central Park"

        await repository.update_point_of_interest(point_of_interest)
        assert store.find_point_of_interest(1).name == "Renamed"

    async def test_remove(self, repository):
        point_of_interest = await repository.get_point_of_interest(1, 2)

        await repository.remove_point_of_interest(point_of_interest)

        assert await repository.get_point_of_interest(1, 2) is None
        assert [p.id for p in await repository.list_points_of_interest(1)] == [1]

    async def test_commit_reports_success(self, repository):
        assert await repository.commit() is True

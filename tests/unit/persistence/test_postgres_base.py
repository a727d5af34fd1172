"""Unit tests for the shared PostgreSQL repository base."""

import pytest

from estate.persistence.repository import (
    PostgresAgentRepository,
    PostgresAmenityRepository,
    PostgresCategoryRepository,
    PostgresCommentRepository,
    PostgresLocationRepository,
    PostgresMediaRepository,
    PostgresPostRepository,
    PostgresPropertyRepository,
    PostgresPropertyTypeRepository,
    PostgresTagRepository,
    PostgresTeamRepository,
    PostgresUserRepository,
)
from estate.persistence.repository.base import PostgresCrudRepository


class TestRowMappingHooks:
    def test_base_without_mapping_cannot_be_instantiated(self):
        class NoMapping(PostgresCrudRepository):
            pass

        with pytest.raises(TypeError):
            NoMapping(session=None)

    @pytest.mark.parametrize(
        "repository_class",
        [
            PostgresAgentRepository,
            PostgresAmenityRepository,
            PostgresCategoryRepository,
            PostgresCommentRepository,
            PostgresLocationRepository,
            PostgresMediaRepository,
            PostgresPostRepository,
            PostgresPropertyRepository,
            PostgresPropertyTypeRepository,
            PostgresTagRepository,
            PostgresTeamRepository,
            PostgresUserRepository,
        ],
    )
    def test_every_repository_provides_its_mapping(self, repository_class):
        # Act
        repository = repository_class(session=None)

        # Assert
        assert repository.session is None

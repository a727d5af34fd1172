"""PostgreSQL implementations of the user and team repositories."""

from collections import defaultdict
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import delete, func, insert, select
from sqlalchemy.sql import ColumnElement

from estate.domain.model import Team, User
from estate.domain.repository import TeamRepository, UserRepository
from estate.domain.value import TeamId, UserId
from estate.persistence.mappers import (
    row_to_team,
    row_to_user,
    team_member_to_dict,
    team_to_dict,
    user_to_dict,
)
from estate.persistence.repository.base import PostgresCrudRepository
from estate.persistence.repository.listing import TEAM_LIST, USER_LIST
from estate.persistence.tables import team_members_table, teams_table, users_table


class PostgresUserRepository(PostgresCrudRepository[User, UserId], UserRepository):
    """PostgreSQL implementation of UserRepository."""

    table = users_table
    resource = "user"
    list_spec = USER_LIST

    def _to_model(self, row: dict[str, Any]) -> User:
        return row_to_user(row)

    def _to_dict(self, entity: User) -> dict[str, Any]:
        return user_to_dict(entity)

    def _custom_filter(self, name: str, value: Any) -> Optional[ColumnElement[bool]]:
        if name == "role":
            return users_table.c.roles.contains([value])
        return None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email address (case-insensitive)."""
        found = await self._fetch(func.lower(users_table.c.email) == email.lower())
        return found[0] if found else None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users, skipping unknown IDs."""
        if not user_ids:
            return []
        return await self._fetch(users_table.c.id.in_(user_ids))


class PostgresTeamRepository(PostgresCrudRepository[Team, TeamId], TeamRepository):
    """PostgreSQL implementation of TeamRepository."""

    table = teams_table
    resource = "team"
    list_spec = TEAM_LIST

    def _to_dict(self, entity: Team) -> dict[str, Any]:
        return team_to_dict(entity)

    async def _fetch_members(
        self, team_ids: list[UUID]
    ) -> dict[UUID, list[dict[str, Any]]]:
        if not team_ids:
            return {}

        stmt = (
            select(team_members_table)
            .where(team_members_table.c.team_id.in_(team_ids))
            .order_by(team_members_table.c.joined_at)
        )
        result = await self.session.execute(stmt)

        members: dict[UUID, list[dict[str, Any]]] = defaultdict(list)
        for row in result.fetchall():
            members[row.team_id].append(row._asdict())
        return members

    def _to_model(self, row: dict[str, Any]) -> Team:
        return row_to_team(row, row.get("members", []))

    async def _load(self, rows: list[dict[str, Any]]) -> list[Team]:
        members = await self._fetch_members([row["id"] for row in rows])
        return [
            self._to_model({**row, "members": members.get(row["id"], [])})
            for row in rows
        ]

    async def _after_save(self, entity: Team) -> None:
        await self.session.execute(
            delete(team_members_table).where(team_members_table.c.team_id == entity.id)
        )
        for member in entity.members:
            await self.session.execute(
                insert(team_members_table).values(**team_member_to_dict(entity, member))
            )

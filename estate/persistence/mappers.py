"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are validated into
them directly and models are dumped back to plain column dicts. Columns
held in join tables (post tags, property amenities, team members) are
passed in separately.
"""

from enum import Enum
from typing import Any, Dict, Iterable

from pydantic import BaseModel

from estate.domain.model import (
    Agent,
    Amenity,
    Category,
    Comment,
    Location,
    Media,
    Post,
    Property,
    PropertyType,
    SeoSetting,
    Tag,
    Team,
    TeamMember,
    User,
)


def _dump(model: BaseModel, exclude: set[str] | None = None) -> Dict[str, Any]:
    """Dump a model to column values, unwrapping enums."""
    data = model.model_dump(exclude=exclude or set())
    return {k: v.value if isinstance(v, Enum) else v for k, v in data.items()}


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User.model_validate(row)


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return _dump(user)


def row_to_team(row: Dict[str, Any], member_rows: Iterable[Dict[str, Any]]) -> Team:
    """Convert a team row and its team_members rows to a Team.

    Args:
        row: teams row as dict
        member_rows: team_members rows for this team

    Returns:
        Team domain model
    """
    members = [
        TeamMember(user_id=m["user_id"], role=m["role"], joined_at=m["joined_at"])
        for m in member_rows
    ]
    return Team.model_validate({**row, "members": members})


def team_to_dict(team: Team) -> Dict[str, Any]:
    """Convert Team domain model to database dict (members excluded)."""
    return _dump(team, exclude={"members"})


def team_member_to_dict(team: Team, member: TeamMember) -> Dict[str, Any]:
    return {
        "team_id": team.id,
        "user_id": member.user_id,
        "role": member.role.value,
        "joined_at": member.joined_at,
    }


def row_to_agent(row: Dict[str, Any]) -> Agent:
    """Convert database row to Agent domain model."""
    return Agent.model_validate(row)


def agent_to_dict(agent: Agent) -> Dict[str, Any]:
    """Convert Agent domain model to database dict."""
    return _dump(agent)


def row_to_amenity(row: Dict[str, Any]) -> Amenity:
    """Convert database row to Amenity domain model."""
    return Amenity.model_validate(row)


def amenity_to_dict(amenity: Amenity) -> Dict[str, Any]:
    """Convert Amenity domain model to database dict."""
    return _dump(amenity)


def row_to_location(row: Dict[str, Any]) -> Location:
    """Convert database row to Location domain model."""
    return Location.model_validate(row)


def location_to_dict(location: Location) -> Dict[str, Any]:
    """Convert Location domain model to database dict."""
    return _dump(location)


def row_to_property_type(row: Dict[str, Any]) -> PropertyType:
    """Convert database row to PropertyType domain model."""
    return PropertyType.model_validate(row)


def property_type_to_dict(property_type: PropertyType) -> Dict[str, Any]:
    """Convert PropertyType domain model to database dict."""
    return _dump(property_type)


def row_to_property(row: Dict[str, Any], amenity_ids: list | None = None) -> Property:
    """Convert database row to Property domain model.

    Args:
        row: properties row as dict
        amenity_ids: Amenity IDs from property_amenities

    Returns:
        Property domain model
    """
    return Property.model_validate({**row, "amenity_ids": amenity_ids or []})


def property_to_dict(prop: Property) -> Dict[str, Any]:
    """Convert Property domain model to database dict (amenities excluded)."""
    return _dump(prop, exclude={"amenity_ids"})


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model."""
    return Category.model_validate(row)


def category_to_dict(category: Category) -> Dict[str, Any]:
    """Convert Category domain model to database dict."""
    return _dump(category)


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag.model_validate(row)


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return _dump(tag)


def row_to_media(row: Dict[str, Any]) -> Media:
    """Convert database row to Media domain model."""
    return Media.model_validate(row)


def media_to_dict(media: Media) -> Dict[str, Any]:
    """Convert Media domain model to database dict."""
    return _dump(media, exclude={"is_image", "size_for_humans"})


def row_to_post(row: Dict[str, Any], tag_ids: list | None = None) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: posts row as dict
        tag_ids: Tag IDs from post_tags

    Returns:
        Post domain model
    """
    return Post.model_validate({**row, "tag_ids": tag_ids or []})


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict (tags excluded)."""
    return _dump(post, exclude={"tag_ids", "reading_time"})


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment.model_validate(row)


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return _dump(comment, exclude={"is_reply", "is_guest"})


def row_to_seo_setting(row: Dict[str, Any]) -> SeoSetting:
    """Convert database row to SeoSetting domain model."""
    return SeoSetting.model_validate(row)


def seo_setting_to_dict(setting: SeoSetting) -> Dict[str, Any]:
    """Convert SeoSetting domain model to database dict."""
    return _dump(setting)

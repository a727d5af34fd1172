"""SEO setting entity."""

import json
from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from estate.domain.model.common import DomainModel
from estate.domain.value import SeoSettingId, SettingType


class SeoSetting(DomainModel):
    """A site-wide SEO key/value pair.

    ``value`` is stored as text; ``typed_value`` interprets it according
    to ``type``.
    """

    id: SeoSettingId
    key: str = Field(min_length=1, max_length=255)
    value: Optional[str] = None
    type: SettingType = SettingType.STRING
    group: str = "general"
    description: Optional[str] = None
    is_active: bool = True
    sort_order: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def typed_value(self) -> Any:
        return parse_setting_value(self.value, self.type)


def parse_setting_value(value: str | None, setting_type: SettingType) -> Any:
    """Interpret a stored setting string according to its type."""
    if value is None:
        return None
    if setting_type == SettingType.BOOLEAN:
        return value.strip().lower() in ("1", "true", "yes", "on")
    if setting_type == SettingType.INTEGER:
        return int(value)
    if setting_type == SettingType.JSON:
        return json.loads(value)
    return value


def format_setting_value(value: Any, setting_type: SettingType) -> str | None:
    """Serialize a value for storage: json dumps, booleans as '1'/'0'."""
    if value is None:
        return None
    if setting_type == SettingType.JSON:
        return json.dumps(value)
    if setting_type == SettingType.BOOLEAN:
        if isinstance(value, str):
            return "1" if parse_setting_value(value, SettingType.BOOLEAN) else "0"
        return "1" if value else "0"
    return str(value)

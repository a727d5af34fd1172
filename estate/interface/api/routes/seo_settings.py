"""SEO settings routes."""

from typing import Any

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from estate.domain.model import SeoSetting
from estate.domain.service import SeoAnalysis, SeoSettingService, SettingUpdate
from estate.domain.value import SettingType
from estate.interface.api.deps import admin_user_id

router = APIRouter(
    prefix="/seo-settings",
    tags=["seo-settings"],
    route_class=DishkaRoute,
    dependencies=[Depends(admin_user_id)],
)


class UpdateSettingsAPIRequest(BaseModel):
    settings: list[SettingUpdate] = Field(min_length=1)


class SetSettingAPIRequest(BaseModel):
    key: str = Field(min_length=1, max_length=255)
    value: Any = None
    type: SettingType = SettingType.STRING
    group: str = Field(default="general", min_length=1, max_length=100)


class AnalyzeAPIRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    og_image: str | None = None
    twitter_card: str | None = None


class MessageResponse(BaseModel):
    message: str


@router.get("", response_model=dict[str, list[SeoSetting]])
async def list_settings(
    seo_setting_service: FromDishka[SeoSettingService],
) -> dict[str, list[SeoSetting]]:
    """All settings grouped for the settings screen."""
    return await seo_setting_service.list_grouped()


@router.put("", response_model=MessageResponse)
async def update_settings(
    request: UpdateSettingsAPIRequest,
    seo_setting_service: FromDishka[SeoSettingService],
) -> MessageResponse:
    count = await seo_setting_service.update_many(request.settings)
    return MessageResponse(message=f"{count} SEO settings updated successfully.")


@router.post("", response_model=SeoSetting)
async def set_setting(
    request: SetSettingAPIRequest,
    seo_setting_service: FromDishka[SeoSettingService],
) -> SeoSetting:
    """Create or overwrite one setting."""
    return await seo_setting_service.set(
        request.key, request.value, type=request.type, group=request.group
    )


@router.get("/group/{group}", response_model=dict[str, Any])
async def get_group(
    group: str, seo_setting_service: FromDishka[SeoSettingService]
) -> dict[str, Any]:
    """Typed values of the active settings in one group."""
    return await seo_setting_service.get_by_group(group)


@router.post("/reset", response_model=MessageResponse)
async def reset_settings(
    seo_setting_service: FromDishka[SeoSettingService],
) -> MessageResponse:
    await seo_setting_service.reset_defaults()
    return MessageResponse(message="SEO settings reset to defaults.")


@router.post("/analyze", response_model=SeoAnalysis)
async def analyze(
    request: AnalyzeAPIRequest,
    seo_setting_service: FromDishka[SeoSettingService],
) -> SeoAnalysis:
    """Recommendations for a page title, description and social image."""
    return seo_setting_service.analyze(
        request.title,
        request.description,
        request.og_image,
        twitter_card=request.twitter_card,
    )

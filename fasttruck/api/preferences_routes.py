"""
Theme preference endpoints.

- GET /api/preferences/theme
- PUT /api/preferences/theme   body: {"theme": "light" | "dark"}
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from fasttruck.api.dependencies import get_app_config
from fasttruck.config.app_config import AppConfig, Theme

router = APIRouter()


class ThemePreference(BaseModel):
    theme: Theme


@router.get("/preferences/theme", response_model=ThemePreference)
async def get_theme(config: AppConfig = Depends(get_app_config)):
    return ThemePreference(theme=config.theme)


@router.put("/preferences/theme", response_model=ThemePreference)
async def set_theme(
    preference: ThemePreference,
    config: AppConfig = Depends(get_app_config),
):
    config.update(preference.theme)
    return ThemePreference(theme=config.theme)

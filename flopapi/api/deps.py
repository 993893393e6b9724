from fastapi import Depends, Request

from flopapi.config import Settings
from flopapi.services.pocketbase import PocketBaseClient


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_pocketbase(request: Request) -> PocketBaseClient:
    return request.app.state.pocketbase


AppSettings = Depends(get_app_settings)
PocketBase = Depends(get_pocketbase)

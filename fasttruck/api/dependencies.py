"""
FastAPI dependencies for the objects built by the composition root.

main.create_app() stores the backend, lookup client and app config on
app.state; routes receive them through these functions, and tests can swap
them with app.dependency_overrides.
"""

from fastapi import Request

from fasttruck.config.app_config import AppConfig
from fasttruck.marketplace.base import MarketplaceBackend
from fasttruck.pincode.lookup import PostalLookupClient


def get_backend(request: Request) -> MarketplaceBackend:
    return request.app.state.backend


def get_lookup_client(request: Request) -> PostalLookupClient:
    return request.app.state.lookup_client


def get_app_config(request: Request) -> AppConfig:
    return request.app.state.app_config

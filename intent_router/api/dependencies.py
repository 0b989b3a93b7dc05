"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from intent_router.config.settings import Settings
from intent_router.inference import IntentClassifier
from intent_router.storage import ResultCache


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_classifier(request: Request) -> IntentClassifier:
    return request.app.state.classifier


def get_cache(request: Request) -> ResultCache | None:
    return request.app.state.cache


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
ClassifierDep = Annotated[IntentClassifier, Depends(get_classifier)]
CacheDep = Annotated[ResultCache | None, Depends(get_cache)]

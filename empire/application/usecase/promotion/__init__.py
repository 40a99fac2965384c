"""Promotion use cases."""

from .list_promotions import ListPromotionsResponse, ListPromotionsUseCase
from .manage_promotion import (
    CreatePromotionRequest,
    CreatePromotionUseCase,
    DeletePromotionUseCase,
    PromotionIdRequest,
    PromotionResponse,
    UpdatePromotionRequest,
    UpdatePromotionUseCase,
)
from .views import PromotionInput, PromotionItem

__all__ = [
    "CreatePromotionRequest",
    "CreatePromotionUseCase",
    "DeletePromotionUseCase",
    "ListPromotionsResponse",
    "ListPromotionsUseCase",
    "PromotionIdRequest",
    "PromotionInput",
    "PromotionItem",
    "PromotionResponse",
    "UpdatePromotionRequest",
    "UpdatePromotionUseCase",
]

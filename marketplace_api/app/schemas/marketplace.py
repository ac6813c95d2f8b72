"""Pydantic models for goods listed on the marketplace."""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from .common import CamelModel, Money, UpdateModel

ItemCondition = Literal["new", "used", "refurbished"]
ItemStatus = Literal["active", "sold", "inactive"]


class MarketplaceItemCreate(CamelModel):
    title: str = Field(..., min_length=1, examples=["HP Laptop 15-inch"])
    description: str = Field(..., min_length=1)
    price: Money = Field(..., examples=["1200000.00"])
    category: str = Field(..., examples=["Electronics"])
    condition: ItemCondition
    images: List[str] = Field(default_factory=list)
    location: str = Field(..., examples=["Makeni"])
    user_id: int


class MarketplaceItem(MarketplaceItemCreate):
    id: int
    status: ItemStatus = "active"
    created_at: datetime


class MarketplaceItemUpdate(UpdateModel):
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Money] = None
    category: Optional[str] = None
    condition: Optional[ItemCondition] = None
    images: Optional[List[str]] = None
    location: Optional[str] = None
    status: Optional[ItemStatus] = None

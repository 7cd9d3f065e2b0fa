"""Pydantic schemas for the YAML collection document."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.records import Category, Control, DccInterface, PowerMethod


class _Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class RollingStockDocument(_Document):
    """A single rolling stock inside a catalog item."""

    type_name: str = Field(..., alias="typeName")
    road_number: Optional[str] = Field(default=None, alias="roadNumber")
    series: Optional[str] = None
    railway: str = ""
    epoch: str = ""
    category: Category
    sub_category: Optional[str] = Field(default=None, alias="subCategory")
    depot: Optional[str] = None
    length: Optional[int] = Field(default=None, gt=0)
    livery: Optional[str] = None
    service_level: Optional[str] = Field(default=None, alias="serviceLevel")
    control: Optional[Control] = None
    dcc_interface: Optional[DccInterface] = Field(default=None, alias="dccInterface")


class PurchaseInfoDocument(_Document):
    purchased_on: Optional[date] = Field(default=None, alias="date")
    price: str
    shop: str = ""


class CollectionElementDocument(_Document):
    """One collection entry: a catalog item plus how it was acquired."""

    brand: str = Field(..., min_length=1)
    item_number: str = Field(..., alias="itemNumber", min_length=1)
    description: str = ""
    power_method: PowerMethod = Field(default=PowerMethod.DC, alias="powerMethod")
    scale: str = ""
    delivery_date: Optional[str] = Field(default=None, alias="deliveryDate")
    count: int = Field(default=1, ge=0)
    rolling_stocks: List[RollingStockDocument] = Field(..., alias="rollingStocks", min_length=1)
    purchase_info: PurchaseInfoDocument = Field(..., alias="purchaseInfo")


class CollectionDocument(_Document):
    """Top-level document; elements are validated one by one by the loader."""

    version: int = 1
    description: str = ""
    modified_at: Optional[datetime] = Field(default=None, alias="modifiedAt")
    elements: List[Any] = Field(default_factory=list)

"""
Listing Models.

Pydantic model for listing records from the listing dump.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.utils.parsers import extract_complex_name, parse_price


class Listing(BaseModel):
    """Real-estate listing record (read-only)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    # Primary key
    listing_no: str = Field(alias="매물번호")

    # Location
    district: str = Field(default="", alias="구")
    neighborhood: str = Field(default="", alias="동", description="동_방향 (e.g. 역삼동_남동)")
    address: str = Field(default="", alias="소재지")

    # Basic info
    complex_name: str = Field(default="", alias="단지명")
    listing_type: str | None = Field(default=None, alias="매물유형")
    building_use: str = Field(default="", alias="건물용도")
    transaction_type: str = Field(default="", alias="거래방식")

    # Price
    price: str = Field(default="", alias="가격")
    price_type: str | None = Field(default=None, alias="가격유형")

    # Space info
    area: str | None = Field(default=None, alias="공급/전용면적")
    floor: str | None = Field(default=None, alias="해당층/총층")
    direction: str | None = Field(default=None, alias="방향")

    # Details
    feature: str | None = Field(default=None, alias="매물특징")
    confirmed_at: str | None = Field(default=None, alias="확인일자")
    detail_url: str | None = Field(default=None, alias="상세링크")
    complex_id: str | None = Field(default=None, alias="단지번호")

    # Lifecycle (passthrough)
    collected_at: str | None = Field(default=None, alias="수집일시")
    status: str | None = None
    first_seen: str | None = None
    last_seen: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def coerce_number(cls, v: Any) -> Any:
        """Ids, floors and prices may arrive as JSON numbers."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator(
        "district",
        "neighborhood",
        "address",
        "complex_name",
        "building_use",
        "transaction_type",
        "price",
        mode="before",
    )
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """Matched text fields treat null as empty."""
        return "" if v is None else v

    @property
    def neighborhood_base(self) -> str:
        """Neighborhood name without the direction suffix."""
        return self.neighborhood.split("_", 1)[0]

    @property
    def price_value(self) -> float:
        """Price in 억 (0.0 if unknown)."""
        return parse_price(self.price)

    @property
    def display_name(self) -> str:
        """Complex name with unit/transaction suffix stripped."""
        return extract_complex_name(self.complex_name)

    def __str__(self) -> str:
        """String representation for console output."""
        return (
            f"[{self.listing_no}] {self.display_name or 'N/A'}\n"
            f"    💰 {self.price} ({self.transaction_type or 'N/A'})\n"
            f"    📍 {self.address or f'{self.district} {self.neighborhood}'}"
        )

from pydantic import BaseModel, ConfigDict, Field, model_validator

from beerstock.models.beer_model import BeerType


# 맥주 등록 스키마
class BeerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    brand: str = Field(..., min_length=1, max_length=200)
    max: int = Field(..., gt=0, le=500)
    quantity: int = Field(..., ge=0, le=100)
    type: BeerType

    @model_validator(mode="after")
    def _quantity_within_max(self):
        # 등록 시에도 0 <= quantity <= max 보장
        if self.quantity > self.max:
            raise ValueError("quantity must not exceed max")
        return self


# 재고 증감 요청 스키마
class QuantityRequest(BaseModel):
    quantity: int = Field(..., ge=0, le=100)


# 맥주 응답 스키마
class BeerResponse(BaseModel):
    id: int
    name: str
    brand: str
    max: int
    quantity: int
    type: BeerType

    model_config = ConfigDict(from_attributes=True)

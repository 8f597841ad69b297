# milkbook/models/rates.py

from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from milkbook.models.entries import MilkType


class RateBandIn(BaseModel):
    milk_type: MilkType
    fat_min: Decimal = Field(ge=0)
    fat_max: Decimal = Field(ge=0)
    snf_min: Decimal = Field(ge=0)
    snf_max: Decimal = Field(ge=0)
    rate: Decimal = Field(gt=0)

    @model_validator(mode="after")
    def bounds_ordered(self) -> "RateBandIn":
        if self.fat_min > self.fat_max:
            raise ValueError("fat_min must not exceed fat_max")
        if self.snf_min > self.snf_max:
            raise ValueError("snf_min must not exceed snf_max")
        return self


class RateBandOut(BaseModel):
    id: int
    milk_type: MilkType
    fat_min: Decimal
    fat_max: Decimal
    snf_min: Decimal
    snf_max: Decimal
    rate: Decimal


class RateQuoteOut(BaseModel):
    milk_type: MilkType
    fat: Decimal
    snf: Decimal
    rate: Decimal

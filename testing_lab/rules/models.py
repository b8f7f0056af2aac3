from __future__ import annotations

import calendar

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class RangeRule(BaseModel):
    min: int
    max: int


class PricingRules(BaseModel):
    discount_codes: dict[str, float] = Field(
        default_factory=lambda: {"SAVE10": 0.1, "SAVE20": 0.2}
    )

    @field_validator("discount_codes")
    @classmethod
    def _rates_are_fractions(cls, value: dict[str, float]) -> dict[str, float]:
        for code, rate in value.items():
            if not 0 <= rate < 1:
                raise ValueError(f"discount for {code} must be in [0, 1), got {rate}")
        return value


class UserInputRules(BaseModel):
    min_username_length: int = 3
    min_age: int = 18


class ValidationRules(BaseModel):
    username: RangeRule = Field(default_factory=lambda: RangeRule(min=5, max=15))
    user_input: UserInputRules = Field(default_factory=UserInputRules)
    driving_ages: dict[str, int] = Field(default_factory=lambda: {"US": 16, "UK": 17})
    password_min_length: int = 8


class BusinessHoursRules(BaseModel):
    open_hour: int = Field(default=8, ge=0, le=23)
    close_hour: int = Field(default=20, ge=1, le=24)

    @model_validator(mode="after")
    def _opens_before_close(self) -> BusinessHoursRules:
        if self.open_hour >= self.close_hour:
            raise ValueError(
                f"open_hour ({self.open_hour}) must be before close_hour ({self.close_hour})"
            )
        return self


class HolidayRules(BaseModel):
    month: int = Field(default=12, ge=1, le=12)
    day: int = Field(default=25, ge=1, le=31)
    discount: float = 0.2

    @model_validator(mode="after")
    def _day_exists_in_month(self) -> HolidayRules:
        # Leap year, so Feb 29 is accepted
        _, days_in_month = calendar.monthrange(2024, self.month)
        if self.day > days_in_month:
            raise ValueError(f"month {self.month} has no day {self.day}")
        return self


class StorefrontRules(BaseModel):
    base_currency: str = "USD"
    home_path: str = "/home"
    page_content: str = "<div>content</div>"
    business_hours: BusinessHoursRules = Field(default_factory=BusinessHoursRules)
    holiday: HolidayRules = Field(default_factory=HolidayRules)
    security_code_digits: int = Field(default=6, ge=1)


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class LabRules(BaseModel):
    project: ProjectRules
    pricing: PricingRules = Field(default_factory=PricingRules)
    validation: ValidationRules = Field(default_factory=ValidationRules)
    storefront: StorefrontRules = Field(default_factory=StorefrontRules)

    model_config = ConfigDict(extra="forbid")

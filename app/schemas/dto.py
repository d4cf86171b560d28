from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.quoting.normalize import parse_sale_amount


class RateRequest(BaseModel):
    store_id: str
    client_name: str
    number_of_spaces: int
    sale_amount: int = 0

    @field_validator("sale_amount", mode="before")
    @classmethod
    def _digits_only(cls, v):
        return parse_sale_amount(v)


class RateResponse(BaseModel):
    rate_amount: int


class QuoteCreate(RateRequest):
    rate_amount: int | None = None
    # Accepted for compatibility and ignored: new quotes always start unconfirmed.
    is_confirmed: bool | None = None


class QuoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    store_id: str
    client_name: str
    number_of_spaces: int
    sale_amount: int
    rate_amount: int | None = None
    is_confirmed: bool
    status: str | None = None
    created_by: str
    created_at: datetime | None = None


class QuoteListResponse(BaseModel):
    items: list[QuoteResponse]
    total: int
    page: int
    page_size: int
    next_page: int | None = None


class QuoteIds(BaseModel):
    ids: list[int] = Field(default_factory=list)


class StatusUpdate(QuoteIds):
    status: str


class StatusResult(BaseModel):
    updated: int


class DeleteResult(BaseModel):
    deleted: int


class StoreResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    rate_factor: float
    requires_sale_amount: bool
    image_url: str | None = None
    custom_client_name_text: str | None = None


class ErrorResponse(BaseModel):
    error: str


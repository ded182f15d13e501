from pydantic import BaseModel, Field
from typing import Literal, Optional, Union

from ..services.cut_list import DEFAULT_BOARD_LENGTH


class FractionConvertRequest(BaseModel):
    value: str = Field(max_length=64)


class DecimalConvertRequest(BaseModel):
    value: float = Field(ge=0, le=1_000_000)
    max_denominator: Literal[1, 2, 4, 8, 16, 32, 64] = 64


class FractionCalculateRequest(BaseModel):
    left: str = Field(max_length=64)
    right: str = Field(max_length=64)
    operation: Literal["add", "subtract", "multiply", "divide"]


class LengthParseRequest(BaseModel):
    text: str = Field(max_length=64)


class CutRequestSchema(BaseModel):
    length: Union[float, str]
    quantity: int = Field(default=1, ge=1, le=1000)
    label: Optional[str] = Field(default=None, max_length=100)
    id: Optional[str] = Field(default=None, max_length=64)


class CutPlanRequest(BaseModel):
    board_length: Union[float, str] = Field(default=DEFAULT_BOARD_LENGTH)
    kerf: Optional[float] = Field(default=None, ge=0, le=1)
    cuts: list[CutRequestSchema] = Field(default=[], max_length=200)

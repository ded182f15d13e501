from pydantic import BaseModel


class FractionSchema(BaseModel):
    whole: int
    numerator: int
    denominator: int


class FractionResult(BaseModel):
    fraction: FractionSchema
    formatted: str
    decimal: float


class PlacementSchema(BaseModel):
    cut_id: str
    label: str
    length: float
    position: float
    kerf_loss: float
    formatted_length: str


class BoardSchema(BaseModel):
    board_number: int
    placements: list[PlacementSchema]
    used_length: float
    kerf_length: float
    waste_length: float
    formatted_waste: str


class CutPlanResponse(BaseModel):
    board_length: float
    kerf: float
    boards: list[BoardSchema]
    total_boards_needed: int
    total_pieces: int
    total_waste: float
    formatted_waste: str
    waste_percentage: float
    instructions: list[str] = []

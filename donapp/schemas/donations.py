from pydantic import BaseModel

from donapp.models.state import FormMode
from donapp.sync import SubmitResult


class DonationInfo(BaseModel):
    id: int
    amount: float | None
    description: str


class DraftInfo(BaseModel):
    amount: str
    description: str
    editing_id: int | None


class StateInfo(BaseModel):
    donations: list[DonationInfo]
    draft: DraftInfo
    mode: FormMode


class DraftUpdate(BaseModel):
    amount: str | None = None
    description: str | None = None


class SubmitResponse(BaseModel):
    result: SubmitResult
    state: StateInfo

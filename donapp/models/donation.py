from pydantic import BaseModel


class Donation(BaseModel):
    id: int
    amount: float | None
    description: str

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "amount": self.amount,
            "description": self.description,
        }

from __future__ import annotations

from enum import StrEnum

from donapp.models.donation import Donation
from donapp.utils.amount import format_amount


class FormMode(StrEnum):
    CREATING = "creating"
    EDITING = "editing"


class Draft:
    """Unsaved form values. Set ``editing_id`` marks the draft as an update of an existing record."""

    def __init__(self, amount: str = "", description: str = "", editing_id: int | None = None) -> None:
        self.amount = amount
        self.description = description
        self.editing_id = editing_id

    @property
    def mode(self) -> FormMode:
        return FormMode.CREATING if self.editing_id is None else FormMode.EDITING

    @property
    def is_complete(self) -> bool:
        return bool(self.amount) and bool(self.description)

    def update(self, amount: str | None = None, description: str | None = None) -> None:
        if amount is not None:
            self.amount = amount
        if description is not None:
            self.description = description

    def start_editing(self, donation: Donation) -> None:
        self.editing_id = donation.id
        self.amount = format_amount(donation.amount)
        self.description = donation.description

    def clear_fields(self) -> None:
        self.amount = ""
        self.description = ""

    def clear(self) -> None:
        self.clear_fields()
        self.editing_id = None

    def to_json(self) -> dict:
        return {
            "amount": self.amount,
            "description": self.description,
            "editing_id": self.editing_id,
        }


class DonationList:
    """Donations currently displayed, in store order."""

    def __init__(self, donations: list[Donation] | None = None) -> None:
        self._donations: list[Donation] = list(donations or [])

    def __len__(self) -> int:
        return len(self._donations)

    def __iter__(self):
        return iter(self._donations)

    def get(self, donation_id: int) -> Donation | None:
        for donation in self._donations:
            if donation.id == donation_id:
                return donation

        return None

    def replace_all(self, donations: list[Donation]) -> None:
        self._donations = list(donations)

    def append(self, donation: Donation) -> None:
        self._donations.append(donation)

    def replace(self, donation_id: int, donation: Donation) -> None:
        self._donations = [
            donation if existing.id == donation_id else existing
            for existing in self._donations
        ]

    def remove(self, donation_id: int) -> None:
        self._donations = [donation for donation in self._donations if donation.id != donation_id]

    def to_json(self) -> list[dict]:
        return [donation.to_json() for donation in self._donations]


class AppState:
    def __init__(self) -> None:
        self.draft = Draft()
        self.donations = DonationList()

    def to_json(self) -> dict:
        return {
            "donations": self.donations.to_json(),
            "draft": self.draft.to_json(),
            "mode": self.draft.mode,
        }

from asyncio import Lock
from enum import StrEnum

from httpx import HTTPError
from loguru import logger

from donapp.config import config
from donapp.models import AppState, Donation
from donapp.utils.amount import parse_amount
from donapp.utils.store import DonationStore, StoreError

# Everything a call to the store can fail with: transport, non-success status, malformed body.
STORE_ERRORS = (HTTPError, StoreError, ValueError)


class SubmitResult(StrEnum):
    SKIPPED = "skipped"
    BUSY = "busy"
    CREATED = "created"
    UPDATED = "updated"
    FAILED = "failed"


class SyncController:
    """Mediates every call to the remote donation collection and keeps ``AppState`` in line with it.

    Local list state is only written after the store acknowledged the write, except for removal,
    which is applied locally whatever status the delete response carries.
    """

    def __init__(
            self, state: AppState | None = None, store: type[DonationStore] = DonationStore,
            keep_draft_on_failure: bool | None = None,
    ) -> None:
        self.state = state or AppState()
        self._store = store
        self._keep_draft_on_failure = (
            config.keep_draft_on_failure if keep_draft_on_failure is None else keep_draft_on_failure
        )
        self._submit_lock = Lock()

    @property
    def submitting(self) -> bool:
        return self._submit_lock.locked()

    async def load_all(self) -> bool:
        try:
            donations = await self._store.get_all()
        except STORE_ERRORS as e:
            logger.opt(exception=e).error("Error fetching donations")
            return False

        self.state.donations.replace_all(donations)
        logger.info(f"Loaded {len(donations)} donations")
        return True

    def update_draft(self, amount: str | None = None, description: str | None = None) -> None:
        self.state.draft.update(amount, description)

    def edit(self, donation_id: int) -> Donation | None:
        if (donation := self.state.donations.get(donation_id)) is None:
            return None

        self.state.draft.start_editing(donation)
        return donation

    async def submit(self) -> SubmitResult:
        draft = self.state.draft
        if not draft.is_complete:
            logger.debug("Draft is incomplete, not submitting")
            return SubmitResult.SKIPPED
        if self._submit_lock.locked():
            logger.debug("Submit is already in flight, ignoring")
            return SubmitResult.BUSY

        async with self._submit_lock:
            return await self._submit(draft.editing_id, parse_amount(draft.amount), draft.description)

    async def _submit(self, editing_id: int | None, amount: float, description: str) -> SubmitResult:
        draft = self.state.draft
        try:
            if editing_id is not None:
                donation = await self._store.update(editing_id, amount, description)
                self.state.donations.replace(editing_id, donation)
                result = SubmitResult.UPDATED
            else:
                donation = await self._store.create(amount, description)
                self.state.donations.append(donation)
                result = SubmitResult.CREATED
        except StoreError as e:
            logger.opt(exception=e).error(f"Error donating, store returned {e.status_code}")
            if not self._keep_draft_on_failure:
                draft.clear_fields()
            return SubmitResult.FAILED
        except STORE_ERRORS as e:
            logger.opt(exception=e).error("Error donating")
            return SubmitResult.FAILED

        draft.clear()
        return result

    async def remove(self, donation_id: int) -> None:
        try:
            status_code = await self._store.delete(donation_id)
        except HTTPError as e:
            logger.opt(exception=e).error(f"Error deleting donation {donation_id}")
            return

        if status_code >= 400:
            logger.warning(f"Store returned {status_code} when deleting donation {donation_id}")

        self.state.donations.remove(donation_id)
        if self.state.draft.editing_id == donation_id:
            self.state.draft.clear()

from functools import wraps
from typing import ParamSpec, TypeVar, Callable, Awaitable, Concatenate

from httpx import AsyncClient
from loguru import logger
from pydantic import ValidationError

from ..config import config
from ..models import Donation
from .amount import amount_to_json

P = ParamSpec("P")
T = TypeVar("T")


def with_httpx(func: Callable[Concatenate[AsyncClient, P], Awaitable[T]]) -> Callable[P, Awaitable[T]]:
    @wraps(func)
    async def httpx_wrapper(*args: P.args, **kwargs: P.kwargs):
        async with AsyncClient() as client:
            return await func(*args, client=client, **kwargs)

    return httpx_wrapper


class StoreError(Exception):
    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"Donation store responded with status {status_code}")
        self.status_code = status_code
        self.body = body


class DonationStore:
    BASE = config.store_url
    DONATIONS = f"{BASE}/donations"

    @classmethod
    def donation_url(cls, donation_id: int) -> str:
        return f"{cls.DONATIONS}/{donation_id}"

    @staticmethod
    def _payload(amount: float, description: str) -> dict:
        return {
            "amount": amount_to_json(amount),
            "description": description,
        }

    @classmethod
    @with_httpx
    async def get_all(cls, *, client: AsyncClient) -> list[Donation]:
        resp = await client.get(cls.DONATIONS)
        logger.debug(f"Store get_all response, code={resp.status_code!r}, body={resp.text!r}")

        if not resp.is_success:
            raise StoreError(resp.status_code, resp.text)

        j_resp = resp.json()
        if not isinstance(j_resp, list):
            raise ValueError(f"Expected a list of donations, got {type(j_resp).__name__}")

        donations = []
        for item in j_resp:
            try:
                donations.append(Donation.model_validate(item))
            except ValidationError as e:
                logger.warning(f"Skipping malformed donation record {item!r}: {e.error_count()} error(s)")

        return donations

    @classmethod
    @with_httpx
    async def create(cls, amount: float, description: str, *, client: AsyncClient) -> Donation:
        resp = await client.post(cls.DONATIONS, json=cls._payload(amount, description))
        logger.debug(f"Store create response, code={resp.status_code!r}, body={resp.text!r}")

        if not resp.is_success:
            raise StoreError(resp.status_code, resp.text)

        return Donation.model_validate(resp.json())

    @classmethod
    @with_httpx
    async def update(cls, donation_id: int, amount: float, description: str, *, client: AsyncClient) -> Donation:
        resp = await client.put(cls.donation_url(donation_id), json=cls._payload(amount, description))
        logger.debug(f"Store update response, id={donation_id!r}, code={resp.status_code!r}, body={resp.text!r}")

        if not resp.is_success:
            raise StoreError(resp.status_code, resp.text)

        return Donation.model_validate(resp.json())

    @classmethod
    @with_httpx
    async def delete(cls, donation_id: int, *, client: AsyncClient) -> int:
        resp = await client.delete(cls.donation_url(donation_id))
        logger.debug(f"Store delete response, id={donation_id!r}, code={resp.status_code!r}")

        return resp.status_code

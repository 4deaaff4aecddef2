from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Form, Request
from fastapi.templating import Jinja2Templates
from starlette.responses import RedirectResponse

from donapp.dependencies import ControllerDep, DonationDep
from donapp.utils.amount import format_amount

router = APIRouter()

templates = Jinja2Templates(directory=Path(__file__).resolve().parent.parent / "templates")
templates.env.filters["amount"] = format_amount


def _back_to_index(request: Request) -> RedirectResponse:
    return RedirectResponse(request.url_for("index"), status_code=303)


@router.get("/", name="index")
async def index(request: Request, controller: ControllerDep):
    return templates.TemplateResponse(request, "index.html", {
        "donations": list(controller.state.donations),
        "draft": controller.state.draft,
        "mode": controller.state.draft.mode,
        "submitting": controller.submitting,
    })


@router.post("/donate", name="donate")
async def donate(
        request: Request, controller: ControllerDep,
        amount: Annotated[str, Form()] = "", description: Annotated[str, Form()] = "",
):
    controller.update_draft(amount, description)
    await controller.submit()
    return _back_to_index(request)


@router.post("/donations/{donation_id}/edit", name="edit_donation_form")
async def edit_donation_form(request: Request, controller: ControllerDep, donation: DonationDep):
    controller.edit(donation.id)
    return _back_to_index(request)


@router.post("/donations/{donation_id}/delete", name="delete_donation_form")
async def delete_donation_form(request: Request, controller: ControllerDep, donation_id: int):
    await controller.remove(donation_id)
    return _back_to_index(request)

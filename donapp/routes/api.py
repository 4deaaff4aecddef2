from fastapi import APIRouter

from donapp.dependencies import ControllerDep, DonationDep
from donapp.schemas.donations import StateInfo, DraftUpdate, SubmitResponse

router = APIRouter(prefix="/api")


@router.get("/state", response_model=StateInfo)
async def get_state(controller: ControllerDep):
    return controller.state.to_json()


@router.patch("/draft", response_model=StateInfo)
async def update_draft(controller: ControllerDep, data: DraftUpdate):
    controller.update_draft(data.amount, data.description)
    return controller.state.to_json()


@router.post("/submit", response_model=SubmitResponse)
async def submit_draft(controller: ControllerDep):
    result = await controller.submit()
    return {
        "result": result,
        "state": controller.state.to_json(),
    }


@router.post("/donations/{donation_id}/edit", response_model=StateInfo)
async def edit_donation(controller: ControllerDep, donation: DonationDep):
    controller.edit(donation.id)
    return controller.state.to_json()


@router.delete("/donations/{donation_id}", response_model=StateInfo)
async def delete_donation(controller: ControllerDep, donation_id: int):
    await controller.remove(donation_id)
    return controller.state.to_json()

from typing import Annotated

from fastapi import Depends, Request

from donapp.models import Donation
from donapp.sync import SyncController
from donapp.utils.custom_exception import CustomMessageException


def sync_controller_dep(request: Request) -> SyncController:
    return request.app.state.controller


ControllerDep = Annotated[SyncController, Depends(sync_controller_dep)]


def donation_dep(donation_id: int, controller: ControllerDep) -> Donation:
    if (donation := controller.state.donations.get(donation_id)) is None:
        raise CustomMessageException("Unknown donation.", 404)

    return donation


DonationDep = Annotated[Donation, Depends(donation_dep)]

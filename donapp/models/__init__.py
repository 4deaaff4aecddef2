from .donation import Donation
from .state import AppState, Draft, DonationList, FormMode

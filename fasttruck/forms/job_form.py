from datetime import date
from functools import partial
from typing import Dict, Optional

from fasttruck.marketplace.models import NewApplication, NewJob
from fasttruck.pincode.lookup import PostalLookupClient
from fasttruck.pincode.resolver import PincodeResolver

PICKUP_PLACEHOLDER = "e.g. 123 Main St, New York, NY"
DROPOFF_PLACEHOLDER = "e.g. 456 Oak Ave, Los Angeles, CA"


class FormValidationError(ValueError):
    """Raised with per-field messages when a form cannot be submitted."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__("; ".join(f"{field}: {message}" for field, message in errors.items()))
        self.errors = errors


class JobPostForm:
    """
    Client job form.

    Pickup and drop-off addresses are owned here; each is bound to a
    PincodeResolver that overwrites it on a successful lookup. Both stay
    directly editable through the resolver's change_address.
    """

    def __init__(self, lookup_client: PostalLookupClient):
        self._lookup_client = lookup_client
        self._generation = 0
        self.reset()

    def reset(self) -> None:
        """
        Clear all fields. Resolvers are rebuilt so their pincode state is fresh.

        Lookups still in flight on the replaced resolvers complete, but their
        addresses are dropped.
        """
        self._generation += 1
        generation = self._generation

        self.title = ""
        self.description = ""
        self.budget = ""
        self.deadline = ""
        self.pickup_address = ""
        self.dropoff_address = ""

        self.pickup = PincodeResolver(
            label="Pickup Address",
            placeholder=PICKUP_PLACEHOLDER,
            value=self.pickup_address,
            on_change=partial(self._set_pickup_address, generation),
            lookup_client=self._lookup_client,
        )
        self.dropoff = PincodeResolver(
            label="Drop-off Address",
            placeholder=DROPOFF_PLACEHOLDER,
            value=self.dropoff_address,
            on_change=partial(self._set_dropoff_address, generation),
            lookup_client=self._lookup_client,
        )

    def _set_pickup_address(self, generation: int, value: str) -> None:
        if generation != self._generation:
            return
        self.pickup_address = value
        self.pickup.value = value

    def _set_dropoff_address(self, generation: int, value: str) -> None:
        if generation != self._generation:
            return
        self.dropoff_address = value
        self.dropoff.value = value

    def validate(self) -> NewJob:
        """
        Check every field and build the insert payload.

        Raises:
            FormValidationError: With a message per invalid field
        """
        errors: Dict[str, str] = {}

        for field in ("title", "description", "pickup_address", "dropoff_address"):
            if not getattr(self, field).strip():
                errors[field] = "This field is required"

        budget: Optional[float] = None
        try:
            budget = float(self.budget)
            if budget <= 0:
                errors["budget"] = "Budget must be greater than zero"
        except (TypeError, ValueError):
            errors["budget"] = "Budget must be a number"

        deadline: Optional[date] = None
        try:
            deadline = date.fromisoformat(self.deadline)
        except (TypeError, ValueError):
            errors["deadline"] = "Deadline must be a date (YYYY-MM-DD)"

        if errors:
            raise FormValidationError(errors)

        return NewJob(
            title=self.title.strip(),
            description=self.description.strip(),
            budget=budget,
            deadline=deadline,
            pickup_address=self.pickup_address.strip(),
            dropoff_address=self.dropoff_address.strip(),
        )


class ApplicationForm:
    """Proposal for one selected job."""

    def __init__(self):
        self.job_id: Optional[str] = None
        self.proposal = ""

    def select(self, job_id: str) -> None:
        self.job_id = job_id

    def validate(self) -> NewApplication:
        errors: Dict[str, str] = {}
        if not self.job_id:
            errors["job_id"] = "No job selected"
        if not self.proposal.strip():
            errors["proposal"] = "This field is required"
        if errors:
            raise FormValidationError(errors)
        return NewApplication(job_id=self.job_id, proposal=self.proposal.strip())

    def reset(self) -> None:
        self.job_id = None
        self.proposal = ""

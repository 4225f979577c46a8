"""
Pincode-to-address resolution widget.

PincodeResolver backs a form control made of two fields:
- "code": the pincode the user types (digits only, max 6)
- "address": a caller-owned, freely editable address field

When the code reaches exactly 6 digits a single lookup is issued. On a match
the composed address "<Name>, <District>, <State> - <code>" is handed to the
caller's on_change callback. Failures only set an inline error message.

Overlapping lookups (user edits the code while one is in flight) are ordered
by issue: each lookup carries a sequence number and only the most recently
issued one may write the address or change state.
"""

import asyncio
from enum import Enum
from typing import Callable, Optional, Set

from fasttruck.pincode.lookup import PincodeLookupError, PostalLookupClient, PostOffice
from fasttruck.utils.log_context import PincodeLogContext

PINCODE_LENGTH = 6
DEFAULT_PLACEHOLDER = "Address will auto-fill from pincode"

INVALID_PINCODE_MESSAGE = "Invalid pincode"
FETCH_FAILED_MESSAGE = "Failed to fetch location"

_DIGITS = frozenset("0123456789")


class ResolutionState(str, Enum):
    """Resolver state. Exactly one is active at any time."""
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


def filter_digits(raw: str) -> str:
    """Keep ASCII decimal digits in order, truncated to the pincode length."""
    return "".join(ch for ch in raw if ch in _DIGITS)[:PINCODE_LENGTH]


def compose_address(office: PostOffice, code: str) -> str:
    return f"{office.name}, {office.district}, {office.state} - {code}"


class PincodeResolver:
    """
    State machine for one pincode + address control.

    Args:
        label: Display string shown above the two fields
        on_change: Caller callback receiving the new address value
        lookup_client: Postal lookup client (injected)
        value: Current address value, owned by the caller
        placeholder: Shown in the address field when empty

    The caller owns `value`: it re-binds `resolver.value` whenever its own
    field changes, typically from inside on_change.
    """

    def __init__(
        self,
        label: str,
        on_change: Callable[[str], None],
        lookup_client: PostalLookupClient,
        value: str = "",
        placeholder: Optional[str] = None,
    ):
        self.label = label
        self.placeholder = placeholder or DEFAULT_PLACEHOLDER
        self.value = value
        self._on_change = on_change
        self._lookup_client = lookup_client

        self._code = ""
        self._state = ResolutionState.IDLE
        self._error = ""
        self._sequence = 0
        self._lookups_issued = 0
        self._tasks: Set[asyncio.Task] = set()
        self._log = PincodeLogContext(label)

    # ------------------------------------------------------------------
    # Read-only view state
    # ------------------------------------------------------------------

    @property
    def code(self) -> str:
        return self._code

    @property
    def state(self) -> ResolutionState:
        return self._state

    @property
    def error(self) -> str:
        return self._error

    @property
    def loading(self) -> bool:
        return self._state is ResolutionState.LOADING

    @property
    def lookups_issued(self) -> int:
        return self._lookups_issued

    # ------------------------------------------------------------------
    # Field events
    # ------------------------------------------------------------------

    def change_code(self, raw: str) -> Optional[asyncio.Task]:
        """
        Handle a change event on the code field.

        Non-digits are dropped silently. A resolution is scheduled on the
        running event loop if and only if the filtered value has exactly 6
        digits, even when it equals the previous code.

        Lookups need a running event loop. Called without one, the code is
        still stored but no lookup is issued and the state is left as is.

        Returns:
            The scheduled resolution task, or None when no lookup was issued
        """
        self._code = filter_digits(raw)

        if len(self._code) != PINCODE_LENGTH:
            return None

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._log.log_warning(f"No running event loop, lookup for {self._code} not issued")
            return None

        sequence = self._begin(self._code)
        task = loop.create_task(self._run(self._code, sequence))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def change_address(self, value: str) -> None:
        """Direct user edit of the address field, forwarded in any state."""
        self._on_change(value)

    async def resolve(self, code: str) -> None:
        """Run one resolution for an already-validated 6-digit code and wait for it."""
        sequence = self._begin(code)
        await self._run(code, sequence)

    async def settle(self) -> None:
        """Wait until every in-flight resolution has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def _begin(self, code: str) -> int:
        self._sequence += 1
        self._lookups_issued += 1
        self._state = ResolutionState.LOADING
        self._error = ""
        self._log.log_info(f"Lookup #{self._sequence} issued for {code}")
        return self._sequence

    def _is_current(self, sequence: int) -> bool:
        return sequence == self._sequence

    def _fail(self, message: str) -> None:
        self._state = ResolutionState.ERROR
        self._error = message

    async def _run(self, code: str, sequence: int) -> None:
        try:
            result = await self._lookup_client.lookup(code)

            if not self._is_current(sequence):
                self._log.log_info(f"Discarding stale lookup #{sequence} for {code}")
                return

            office = result.first_office
            if result.is_match and office is not None:
                self._on_change(compose_address(office, code))
                self._state = ResolutionState.IDLE
            else:
                self._log.log_info(f"No match for {code}: {result.message}")
                self._fail(INVALID_PINCODE_MESSAGE)

        except PincodeLookupError as e:
            self._log.log_warning(str(e))
            if self._is_current(sequence):
                self._fail(FETCH_FAILED_MESSAGE)

        except Exception as e:
            # Errors stay inside the widget; the caller's field is left untouched
            self._log.log_error(f"Lookup #{sequence} for {code} failed: {e!r}")
            if self._is_current(sequence):
                self._fail(FETCH_FAILED_MESSAGE)

        finally:
            if self._is_current(sequence) and self._state is ResolutionState.LOADING:
                self._state = ResolutionState.IDLE

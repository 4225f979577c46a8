"""
Pincode resolution.

- lookup: async client for the postal lookup service
- resolver: PincodeResolver widget state machine
"""

from fasttruck.pincode.lookup import (
    LookupFormatError,
    LookupResult,
    LookupTransportError,
    PincodeLookupError,
    PostalLookupClient,
    PostOffice,
)
from fasttruck.pincode.resolver import (
    FETCH_FAILED_MESSAGE,
    INVALID_PINCODE_MESSAGE,
    PincodeResolver,
    ResolutionState,
)

__all__ = [
    "FETCH_FAILED_MESSAGE",
    "INVALID_PINCODE_MESSAGE",
    "LookupFormatError",
    "LookupResult",
    "LookupTransportError",
    "PincodeLookupError",
    "PincodeResolver",
    "PostalLookupClient",
    "PostOffice",
    "ResolutionState",
]

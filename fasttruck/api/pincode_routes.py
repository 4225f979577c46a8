"""
Pincode resolution endpoint.

GET /api/pincode/{code} runs one resolution through PincodeResolver and
reports the resulting address or inline error. Failures are part of the
response body, not HTTP errors.
"""

import re
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from fasttruck.api.dependencies import get_lookup_client
from fasttruck.pincode.lookup import PostalLookupClient
from fasttruck.pincode.resolver import PincodeResolver, ResolutionState

router = APIRouter()

_PINCODE_PATTERN = re.compile(r"[0-9]{6}")


class PincodeResolution(BaseModel):
    """Outcome of resolving one pincode"""

    code: str = Field(description="6-digit pincode")
    address: Optional[str] = Field(default=None, description="Composed address on success")
    state: ResolutionState = Field(description="Resolver state after the lookup settled")
    error: Optional[str] = Field(default=None, description="Inline error message")


@router.get("/pincode/{code}", response_model=PincodeResolution)
async def resolve_pincode(
    code: str,
    lookup_client: PostalLookupClient = Depends(get_lookup_client),
):
    if not _PINCODE_PATTERN.fullmatch(code):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Pincode must be exactly 6 digits",
        )

    addresses: List[str] = []
    resolver = PincodeResolver(
        label="api",
        on_change=addresses.append,
        lookup_client=lookup_client,
    )
    await resolver.resolve(code)

    return PincodeResolution(
        code=code,
        address=addresses[-1] if addresses else None,
        state=resolver.state,
        error=resolver.error or None,
    )

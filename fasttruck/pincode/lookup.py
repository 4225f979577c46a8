"""
Postal lookup client for Indian pincodes.

Wraps the public India Post API:
    GET https://api.postalpincode.in/pincode/{code}

Response shape:
    [
        {
            "Message": "Number of pincode(s) found:1",
            "Status": "Success",
            "PostOffice": [
                {"Name": "Fort", "District": "Mumbai", "State": "Maharashtra", ...}
            ]
        }
    ]

A non-2xx status or a JSON body of the wrong shape is reported as an empty
(no match) result. Only transport failures and unparseable bodies raise.
"""

import logging
from typing import Any, List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fasttruck.config.settings import settings

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "Success"


class PincodeLookupError(Exception):
    """Base class for lookup failures that never produced a usable body."""


class LookupTransportError(PincodeLookupError):
    """Network-level failure (connect error, timeout, protocol error)."""


class LookupFormatError(PincodeLookupError):
    """Response body could not be parsed as JSON."""


class PostOffice(BaseModel):
    """Single post office record from the lookup service."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(alias="Name")
    district: str = Field(alias="District")
    state: str = Field(alias="State")
    block: Optional[str] = Field(default=None, alias="Block")
    region: Optional[str] = Field(default=None, alias="Region")
    pincode: Optional[str] = Field(default=None, alias="Pincode")


class LookupResult(BaseModel):
    """First result record of a lookup response."""

    status: str = ""
    message: Optional[str] = None
    post_offices: List[PostOffice] = Field(default_factory=list)

    @property
    def is_match(self) -> bool:
        return self.status == SUCCESS_STATUS and len(self.post_offices) > 0

    @property
    def first_office(self) -> Optional[PostOffice]:
        return self.post_offices[0] if self.post_offices else None

    @classmethod
    def no_match(cls, message: Optional[str] = None) -> "LookupResult":
        return cls(status="", message=message)

    @classmethod
    def from_payload(cls, payload: Any) -> "LookupResult":
        """
        Build a result from the decoded JSON body.

        Only the first element is inspected. Anything that does not look like
        the documented shape yields a no-match result.
        """
        if not isinstance(payload, list) or not payload:
            return cls.no_match("Unexpected response shape")

        first = payload[0]
        if not isinstance(first, dict):
            return cls.no_match("Unexpected response shape")

        raw_offices = first.get("PostOffice") or []
        if not isinstance(raw_offices, list):
            raw_offices = []

        try:
            offices = [PostOffice.model_validate(office) for office in raw_offices]
        except ValidationError as e:
            logger.warning(f"Discarding malformed post office records: {e.error_count()} error(s)")
            return cls.no_match("Malformed post office record")

        return cls(
            status=str(first.get("Status") or ""),
            message=first.get("Message"),
            post_offices=offices,
        )


class PostalLookupClient:
    """
    Async client for the postal lookup service.

    Owns its httpx.AsyncClient unless one is injected (tests inject a client
    built on httpx.MockTransport).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or settings.PINCODE_API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.PINCODE_TIMEOUT_SECONDS
        self._client = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    def get_headers(self) -> dict:
        return {"Accept": "application/json"}

    async def lookup(self, code: str) -> LookupResult:
        """
        Look up a pincode.

        Args:
            code: 6-digit pincode

        Returns:
            LookupResult (is_match False for non-2xx or unexpected shape)

        Raises:
            LookupTransportError: On network failure or timeout
            LookupFormatError: When the body is not valid JSON
        """
        url = f"{self.base_url}/{code}"
        logger.debug(f"Requesting {url}")

        try:
            response = await self._get_client().get(
                url,
                headers=self.get_headers(),
                timeout=self.timeout,
            )
        except httpx.HTTPError as e:
            raise LookupTransportError(f"Lookup request failed for {code}: {e}") from e

        if not response.is_success:
            logger.info(f"Lookup for {code} returned HTTP {response.status_code}")
            return LookupResult.no_match(f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise LookupFormatError(f"Lookup response for {code} is not JSON") from e

        return LookupResult.from_payload(payload)

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "PostalLookupClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

"""
Component logging utilities with Protocol + Mixin pattern.

Each component defines its type and context format, the mixin provides
consistent log_info/log_warning/log_error methods.

Usage:
    class PincodeLogContext(ComponentLoggerMixin):
        component_type = ComponentType.PINCODE_RESOLVER

        def __init__(self, label: str):
            self.label = label

        def _log_context(self) -> str:
            return f"field={self.label}"

    ctx = PincodeLogContext("Pickup")
    ctx.log_info("Lookup issued")  # [PincodeResolver:field=Pickup] Lookup issued
"""

import logging
from enum import Enum
from typing import Protocol

logger = logging.getLogger(__name__)


class ComponentType(Enum):
    """Component type enum for log prefix identification."""
    PINCODE_RESOLVER = "PincodeResolver"
    CLIENT_DASHBOARD = "ClientDashboard"
    FREELANCER_DASHBOARD = "FreelancerDashboard"


class ComponentLoggerProtocol(Protocol):
    """
    Protocol defining what classes using ComponentLoggerMixin must provide.
    """
    component_type: ComponentType

    def _log_context(self) -> str:
        """Return context string like 'field=Pickup' or 'user=abc'."""
        ...


class ComponentLoggerMixin:
    """
    Mixin providing log_info/log_warning/log_error methods.

    Log format: [ComponentType:context] message
    """

    def _log_prefix(self: ComponentLoggerProtocol) -> str:
        return f"[{self.component_type.value}:{self._log_context()}]"

    def log_debug(self: ComponentLoggerProtocol, message: str) -> None:
        logger.debug(f"{self._log_prefix()} {message}")

    def log_info(self: ComponentLoggerProtocol, message: str) -> None:
        """Log info message with component prefix."""
        logger.info(f"{self._log_prefix()} {message}")

    def log_warning(self: ComponentLoggerProtocol, message: str) -> None:
        """Log warning message with component prefix."""
        logger.warning(f"{self._log_prefix()} {message}")

    def log_error(self: ComponentLoggerProtocol, message: str) -> None:
        """Log error message with component prefix."""
        logger.error(f"{self._log_prefix()} {message}")


# =============================================================================
# Concrete Context Classes
# =============================================================================

class PincodeLogContext(ComponentLoggerMixin):
    """
    Logging context for PincodeResolver.

    Log format: [PincodeResolver:field=<label>] message
    """
    component_type = ComponentType.PINCODE_RESOLVER

    def __init__(self, label: str):
        self.label = label

    def _log_context(self) -> str:
        return f"field={self.label}"


class DashboardLogContext(ComponentLoggerMixin):
    """
    Logging context for the client and freelancer dashboards.

    Log format: [ClientDashboard:user=<id>] message
    """

    def __init__(self, component_type: ComponentType, user_id: str):
        self.component_type = component_type
        self.user_id = user_id

    def _log_context(self) -> str:
        return f"user={self.user_id}"

"""Profile scope to attributes filter protocol contract."""

from typing import Protocol, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities import Principal, RegisteredService
    from ..value_objects import Service
    from .request_context import RequestContext


@runtime_checkable
class ProfileScopeToAttributesFilter(Protocol):
    """Protocol for the attribute filtering security boundary.

    Defines ONLY the contract: the returned principal's attribute keys are a
    subset of the candidate's keys (or renamed ones when the release policy
    renames attributes). Failures propagate to the caller.
    """

    def filter(
        self,
        service: "Service",
        principal: "Principal",
        registered_service: "RegisteredService",
        context: "RequestContext",
    ) -> "Principal":
        """Filter principal attributes for a service.

        Args:
            service: Resolved target service
            principal: Candidate principal built from the external profile
            registered_service: Registration of the requesting client
            context: Current request context

        Returns:
            Principal with released attributes only
        """
        ...

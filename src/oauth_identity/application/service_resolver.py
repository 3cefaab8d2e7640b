"""Service resolution for OAuth client requests."""

import logging
from typing import Optional

from ..core.constants import PARAMETER_SERVICE, HEADER_SERVICE_ALIAS
from ..core.entities import RegisteredService
from ..core.protocols import RequestContext, ServiceFactory
from ..core.value_objects import Service
from ..utils import is_blank, to_text

logger = logging.getLogger(__name__)


class ServiceResolver:
    """Resolve the canonical service a client authenticates against.

    Handles ONLY the choice of service identifier. The first non-blank
    source wins: the service header, its namespaced alias, and finally the
    registered client identifier. Header override is opt-in per call because
    header values are caller-controlled.
    """

    def __init__(
        self,
        service_factory: ServiceFactory,
        service_header_name: str = PARAMETER_SERVICE,
        service_header_alias: str = HEADER_SERVICE_ALIAS,
    ):
        """Initialize resolver.

        Args:
            service_factory: Factory creating the resolved Service
            service_header_name: Primary header naming the service
            service_header_alias: Secondary, namespaced header name
        """
        self._service_factory = service_factory
        self.service_header_name = service_header_name
        self.service_header_alias = service_header_alias

    def resolve(
        self,
        registered_service: RegisteredService,
        context: RequestContext,
        use_service_header: bool = False,
    ) -> Service:
        """Resolve service for the current request.

        Args:
            registered_service: Registration of the requesting client
            context: Current request context
            use_service_header: Whether request headers may override the service

        Returns:
            Service with a non-blank identifier
        """
        service_id: Optional[str] = None
        if use_service_header:
            service_id = self._header(context, self.service_header_name)
            if is_blank(service_id):
                service_id = self._header(context, self.service_header_alias)
            logger.debug("Located service based on request header is [%s]", service_id)

        if is_blank(service_id):
            service_id = registered_service.client_id

        return self._service_factory.create_service(service_id)

    @staticmethod
    def _header(context: RequestContext, name: str) -> Optional[str]:
        value = to_text(context.get_request_header(name))
        return value.strip() if value is not None else None

"""Web application service factory."""

import logging

from ...core.exceptions import InvalidServiceError
from ...core.value_objects import Service
from ...utils import is_blank, to_text

logger = logging.getLogger(__name__)


class WebApplicationServiceFactory:
    """Create services from client-supplied or registered identifiers."""

    def create_service(self, id: str) -> Service:
        """Create service.

        Args:
            id: Service identifier, kept verbatim

        Returns:
            New Service value

        Raises:
            InvalidServiceError: If identifier is blank
        """
        if is_blank(id):
            raise InvalidServiceError.blank_identifier(id)

        service = Service(id=to_text(id))
        logger.debug("Created service [%s]", service.id)
        return service

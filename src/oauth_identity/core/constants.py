"""Protocol constants shared by the identity assembly step.

Names of request headers, request parameters and authentication attributes
that the service resolver and authentication builder read or write.
"""

from typing import Final

# Request header carrying the service a client declares it represents
PARAMETER_SERVICE: Final[str] = "service"

# Namespaced alias of the service header
HEADER_SERVICE_ALIAS: Final[str] = "X-" + PARAMETER_SERVICE

# OAuth/OIDC request-correlation and replay-protection parameters
STATE: Final[str] = "state"
NONCE: Final[str] = "nonce"

# OIDC requested scopes (space separated)
SCOPE: Final[str] = "scope"

# Authentication attributes seeded from the external profile
ATTRIBUTE_PERMISSIONS: Final[str] = "permissions"
ATTRIBUTE_ROLES: Final[str] = "roles"

"""Identity value objects.

Immutable value objects for the identity assembly step. Each value object
handles exactly one concept with validation.
"""

from .service import Service
from .credential import IdentifiableCredential, CredentialMetaData
from .protocol_parameters import ProtocolParameters

__all__ = [
    "Service",
    "IdentifiableCredential",
    "CredentialMetaData",
    "ProtocolParameters",
]

"""Attribute release policies.

Variants are interchangeable through the AttributeReleasePolicy protocol and
are chosen per registered service.
"""

from .release_all import ReturnAllAttributeReleasePolicy, DenyAllAttributeReleasePolicy
from .allowed import ReturnAllowedAttributeReleasePolicy, ReturnMappedAttributeReleasePolicy

__all__ = [
    "ReturnAllAttributeReleasePolicy",
    "DenyAllAttributeReleasePolicy",
    "ReturnAllowedAttributeReleasePolicy",
    "ReturnMappedAttributeReleasePolicy",
]

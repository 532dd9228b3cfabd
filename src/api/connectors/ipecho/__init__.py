"""Connector do serviço público de eco de IP."""

from .resolver import IfconfigAddressResolver, create_address_resolver

__all__ = ["IfconfigAddressResolver", "create_address_resolver"]

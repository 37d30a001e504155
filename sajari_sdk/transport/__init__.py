"""RPC transport module."""

from sajari_sdk.transport.credentials import Credentials, KeyCredentials
from sajari_sdk.transport.service import HTTPTransport, RPCTransport

__all__ = [
    "Credentials",
    "HTTPTransport",
    "KeyCredentials",
    "RPCTransport",
]

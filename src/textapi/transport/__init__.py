"""Transports used to reach the Text API."""

from textapi.transport.base import Transport
from textapi.transport.http import DEFAULT_HOST, DEFAULT_TIMEOUT, Auth, HTTPTransport

__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_TIMEOUT",
    "Auth",
    "HTTPTransport",
    "Transport",
]

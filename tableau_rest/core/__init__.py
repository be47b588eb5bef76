"""
tableau_rest.core - Core connectivity and authentication
=========================================================

This module provides the foundational classes for talking to Tableau:

- TableauAuth / TableauConfig: Credentials and connection configuration
- TableauSession: Request building and one-round-trip transport
- handle_response / TableauError: Response classification and error mapping
- sign_in: Credential exchange for a session token
- TableauClient: Signed-in client exposing the resource services

"""

from tableau_rest.core.response import (
    ERR_CODE_INTERNAL,
    TableauError,
    handle_response,
)

from tableau_rest.core.session import (
    TableauAuth,
    TableauConfig,
    TableauSession,
    TableauSessionState,
)

from tableau_rest.core.auth import sign_in

from tableau_rest.core.connection import TableauClient

__all__ = [
    "ERR_CODE_INTERNAL",
    "TableauError",
    "handle_response",
    "TableauAuth",
    "TableauConfig",
    "TableauSession",
    "TableauSessionState",
    "sign_in",
    "TableauClient",
]

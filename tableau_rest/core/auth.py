"""
tableau_rest.core.auth - Sign-in exchange
==========================================

Exchanges credentials for a session token and the resolved site id, and
stores both on the session so every later request carries them.
"""

from __future__ import annotations

from typing import Tuple

from tableau_rest.core.session import AUTH_HEADER, TableauAuth, TableauSession
from tableau_rest.models import Credentials, SignInRequest, SignInResponse, Site

SIGN_IN_PATH = "auth/signin"


def build_credentials(auth: TableauAuth, site_name: str) -> Credentials:
    """Build the ``credentials`` payload for ``auth``."""
    site = Site(content_url=site_name)
    if auth.kind == "pat":
        token_name, token_secret = auth.value
        return Credentials(
            personal_access_token_name=token_name,
            personal_access_token_secret=token_secret,
            site=site,
        )
    if auth.kind == "password":
        name, password = auth.value
        return Credentials(name=name, password=password, site=site)
    raise ValueError("auth.kind must be 'pat' or 'password'")


def sign_in(sess: TableauSession, auth: TableauAuth, site_name: str) -> Tuple[str, str]:
    """
    Sign in and populate the session state.

    Parameters
    ----------
    sess : TableauSession
        Session whose state receives the token and site id
    auth : TableauAuth
        Personal access token or username/password
    site_name : str
        Site content URL; "" selects the default site

    Returns
    -------
    tuple of str
        (token, site_id)

    Raises
    ------
    TableauError
        If the server rejects the credentials or answers with an
        undecodable body
    """
    payload = SignInRequest(credentials=build_credentials(auth, site_name))
    resp: SignInResponse = sess.do("POST", SIGN_IN_PATH, payload.to_wire(), SignInResponse)

    creds = resp.credentials
    state = sess.state
    state.token = creds.token
    state.site_id = creds.site.id or ""
    state.estimated_time_to_expiration = creds.estimated_time_to_expiration
    state.headers[AUTH_HEADER] = creds.token

    sess.logger.info("Signed in to site %r (id=%s)", site_name, state.site_id)
    return state.token, state.site_id


def sign_in_with_token(
    sess: TableauSession, token_name: str, token_secret: str, site_name: str
) -> Tuple[str, str]:
    """Sign in with a personal access token."""
    return sign_in(sess, TableauAuth("pat", (token_name, token_secret)), site_name)

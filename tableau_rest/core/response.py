"""
tableau_rest.core.response - Response classification and decoding
===================================================================

Turns a raw ``requests.Response`` into either a decoded value or a
:class:`TableauError`:

- status >= 400: decode the vendor error envelope and raise
- status 204, or no target: return None without decoding
- otherwise: decode the body into the target type
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Dict, Optional
import json
import logging

from pydantic import TypeAdapter
from requests import Response

from tableau_rest.models import ErrorResponse

ERR_CODE_INTERNAL = "-1"

logger = logging.getLogger("tableau_rest")


class TableauError(RuntimeError):
    """
    Exception raised for Tableau API errors and undecodable responses.

    Attributes
    ----------
    message : str
        Human readable description
    code : str
        Vendor error code, or ``ERR_CODE_INTERNAL`` for decode failures
    meta : dict
        Diagnostic context such as the raw ``body``, the parser ``err``
        and the ``http_status`` text
    status : int, optional
        HTTP status code of the response
    """

    def __init__(
        self,
        message: str,
        code: str,
        meta: Optional[Dict[str, str]] = None,
        status: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.meta = meta or {}
        self.status = status

    def __repr__(self) -> str:
        return f"TableauError(code={self.code!r}, message={self.message!r})"


def status_text(status: int) -> str:
    """Standard reason phrase for ``status``; empty for unknown codes."""
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""


def _raise_for_error(r: Response, body: bytes) -> None:
    raw = body.decode("utf-8", errors="replace")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise TableauError(
            "malformed error response body received",
            ERR_CODE_INTERNAL,
            meta={
                "body": raw,
                "err": str(e),
                "http_status": status_text(r.status_code),
            },
            status=r.status_code,
        ) from e

    # JSON null decodes to an empty envelope
    envelope = ErrorResponse() if data is None else ErrorResponse.model_validate(data)
    err = envelope.error
    if err is None or not (err.summary or err.detail or err.code):
        raise TableauError(
            "internal error, response body doesn't match error type signature",
            ERR_CODE_INTERNAL,
            meta={
                "body": raw,
                "http_status": status_text(r.status_code),
            },
            status=r.status_code,
        )

    logger.warning("Tableau API error %s (%s): %s", err.code, r.status_code, err.summary)
    raise TableauError(
        f"{err.summary or ''}: {err.detail or ''}",
        err.code or "",
        status=r.status_code,
    )


def handle_response(r: Response, target: Any = None) -> Any:
    """
    Classify ``r`` and decode its body.

    Parameters
    ----------
    r : requests.Response
        Response of a completed round trip
    target : type, optional
        Anything pydantic can validate into: a model class, ``dict``,
        ``List[Model]``. None means the body is not decoded.

    Returns
    -------
    any
        The decoded value, or None for 204 responses and when no target
        was given

    Raises
    ------
    TableauError
        For status >= 400, and for success bodies that are not valid JSON
    pydantic.ValidationError
        If a JSON body does not fit ``target`` (or the error envelope)
    """
    body = r.content or b""

    if r.status_code >= 400:
        _raise_for_error(r, body)

    if target is None or r.status_code == HTTPStatus.NO_CONTENT:
        logger.debug("Skipping decode for %s response", r.status_code)
        return None

    raw = body.decode("utf-8", errors="replace")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise TableauError(
            "malformed response body received",
            ERR_CODE_INTERNAL,
            meta={
                "body": raw,
                "http_status": status_text(r.status_code),
            },
            status=r.status_code,
        ) from e

    return TypeAdapter(target).validate_python(data)

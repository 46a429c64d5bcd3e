"""
Problem-detail error mapping.

Turns validation failures, domain outcomes and framework errors into
``ProblemDetail`` values with localized text. Every problem detail
carries the same configured ``type`` URI; the kind of error is carried
by ``status`` and ``detail``.

Catalog misses never reach the client: they are logged as a
configuration defect and the caller-supplied fallback text is used.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Optional

from fastapi.responses import JSONResponse

from uservalidation.domain.users.errors import (
    DomainSignal,
    ResourceConflict,
    ResourceNotFound,
)
from uservalidation.domain.validation.violations import Violation
from uservalidation.shared.i18n.catalog import MessageCatalog
from uservalidation.shared.i18n.errors import CatalogError

logger = logging.getLogger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"
DETAIL_SEPARATOR = ";"


@dataclass(frozen=True)
class ProblemDetail:
    """Structured HTTP error body.

    Attributes:
        type: URI identifying this service's problem dialect.
        title: Short reason phrase for ``status``.
        status: HTTP status code.
        detail: Localized human-readable explanation. Never empty.
        instance: Path of the request that failed, if known.
    """

    type: str
    title: str
    status: int
    detail: str
    instance: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {
            "type": self.type,
            "title": self.title,
            "status": self.status,
            "detail": self.detail,
        }
        if self.instance:
            body["instance"] = self.instance
        return body


def problem_response(problem: ProblemDetail, locale: Optional[str] = None) -> JSONResponse:
    """Render a problem detail as an ``application/problem+json`` response."""
    headers = {"Content-Language": locale} if locale else None
    return JSONResponse(
        status_code=problem.status,
        content=problem.to_dict(),
        media_type=PROBLEM_MEDIA_TYPE,
        headers=headers,
    )


def _title(status: int) -> str:
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return "Error"


class ProblemDetailMapper:
    """Maps failures to problem details using a message catalog.

    Built once at startup; holds only read-only collaborators.
    """

    def __init__(self, catalog: MessageCatalog, type_uri: str) -> None:
        self._catalog = catalog
        self._type_uri = str(type_uri)

    @property
    def type_uri(self) -> str:
        return self._type_uri

    def _localize(
        self,
        message_id: str,
        locale: str,
        args: Sequence[object],
        fallback: Optional[str],
    ) -> str:
        try:
            return self._catalog.resolve(message_id, locale, args)
        except CatalogError as exc:
            logger.warning("Catalog miss, using fallback text: %s", exc.message)
            if fallback:
                return fallback
            return " ".join([message_id, *(str(a) for a in args)])

    def _build(self, status: int, detail: str, instance: Optional[str]) -> ProblemDetail:
        return ProblemDetail(
            type=self._type_uri,
            title=_title(status),
            status=int(status),
            detail=detail,
            instance=instance,
        )

    def _log_operator_entry(self, signal: DomainSignal) -> None:
        try:
            text = self._catalog.log_message(signal.log_message_id, *signal.args)
        except CatalogError as exc:
            logger.warning("Catalog miss for log message: %s", exc.message)
            text = " ".join([signal.log_message_id, *signal.args])
        logger.error(text)

    def from_message(
        self,
        status: int,
        message_id: str,
        locale: str,
        args: Sequence[object] = (),
        fallback: Optional[str] = None,
        instance: Optional[str] = None,
    ) -> ProblemDetail:
        """Build a problem detail from a single catalog message."""
        return self._build(status, self._localize(message_id, locale, args, fallback), instance)

    def from_violations(
        self,
        violations: Iterable[Violation],
        locale: str,
        instance: Optional[str] = None,
    ) -> ProblemDetail:
        """Aggregate violations into one 400 problem detail.

        Each violation is localized on its own (falling back to its
        default text) and the results are joined with ``;``.
        """
        texts = [
            self._localize(v.message_id, locale, v.args, v.fallback_text)
            for v in violations
        ]
        if not texts:
            raise ValueError("from_violations needs at least one violation")
        return self._build(HTTPStatus.BAD_REQUEST, DETAIL_SEPARATOR.join(texts), instance)

    def from_not_found(
        self,
        signal: ResourceNotFound,
        locale: str,
        instance: Optional[str] = None,
    ) -> ProblemDetail:
        """Map a not-found outcome to 404, writing one operator log entry first."""
        self._log_operator_entry(signal)
        return self.from_message(
            HTTPStatus.NOT_FOUND, signal.message_id, locale, signal.args, instance=instance
        )

    def from_conflict(
        self,
        signal: ResourceConflict,
        locale: str,
        instance: Optional[str] = None,
    ) -> ProblemDetail:
        """Map a conflict outcome to 409, writing one operator log entry first."""
        self._log_operator_entry(signal)
        return self.from_message(
            HTTPStatus.CONFLICT, signal.message_id, locale, signal.args, instance=instance
        )

"""BaseService — foundation for strext services.

Every service receives the resolved :class:`StrextSettings` at
construction time and reads its per-section defaults from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from strext.services.result import ErrorCode, ServiceError, ServiceResult

if TYPE_CHECKING:
    from strext.config.settings import StrextSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class TextService(BaseService):
            def md5(self, text: str) -> ServiceResult:
                strict = self._settings.digest.strict
                ...
    """

    def __init__(self, settings: StrextSettings) -> None:
        self._settings = settings

    @staticmethod
    def _fail(op: str, code: ErrorCode | str, message: str, **detail: Any) -> ServiceResult:
        """Build a failed ServiceResult."""
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

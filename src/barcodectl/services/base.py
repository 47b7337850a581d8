"""BaseService — shared foundation for barcodectl services.

Every service receives the ``[scheme]`` configuration at construction
time and builds its domain :class:`~barcodectl.domain.fields.Scheme`
once. Services are stateless afterwards: each call is a pure function
of its arguments and the scheme.
"""

from __future__ import annotations

import logging
from datetime import date

from barcodectl.config.models import SchemeConfig
from barcodectl.domain.errors import BarcodeError
from barcodectl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class BarcodeService(BaseService):
            def build(self, ...) -> ServiceResult:
                ...

    Args:
        config: Scheme parameters; defaults when omitted.
        reference_year: Year used for the year-window warning. Defaults
            to the current calendar year.
    """

    def __init__(
        self,
        config: SchemeConfig | None = None,
        *,
        reference_year: int | None = None,
    ) -> None:
        self._config = config or SchemeConfig()
        self._scheme = self._config.build_scheme()
        self._reference_year = reference_year or date.today().year

    def _fail(self, op: str, exc: BarcodeError) -> ServiceResult:
        """Convert a domain error into a failed ServiceResult."""
        logger.debug("%s failed: %s (%s)", op, exc.code, exc.message)
        return ServiceResult.failure(op, exc)

    def _year_window_warnings(self, warnings: list[str]) -> None:
        """Append a warning when the year window is close to exhaustion."""
        last_year = self._scheme.year.last_year
        remaining = last_year - self._reference_year
        if remaining < 0:
            warnings.append(
                f"The year window ended in {last_year}; no code exists for {self._reference_year}"
            )
        elif remaining <= self._config.year_window_warning:
            warnings.append(
                f"Only {remaining} more years are possible with the current barcode "
                f"scheme (last year {last_year})"
            )

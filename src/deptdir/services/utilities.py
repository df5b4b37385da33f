"""UtilityService — statistics and pig latin behind ServiceResult.

These operations share no state with the directory; the service exists so
the CLI can emit them through the same result contract.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from deptdir.domain.pig_latin import convert_to_pig_latin
from deptdir.domain.statistics import median, mode
from deptdir.services.result import ServiceResult

logger = logging.getLogger(__name__)


class UtilityService:
    """Stateless wrappers around the domain utility functions."""

    def median(self, numbers: Sequence[int]) -> ServiceResult:
        values = list(numbers)
        try:
            value = median(values)
        except ValueError as exc:
            logger.debug("median rejected input: %s", exc)
            return ServiceResult.failure("median", "EMPTY_INPUT", "No numbers given")
        return ServiceResult.success("median", median=value, sorted=values)

    def mode(self, numbers: Sequence[int]) -> ServiceResult:
        value, count = mode(numbers)
        return ServiceResult.success("mode", mode=value, count=count)

    def pig_latin(self, sentence: str) -> ServiceResult:
        return ServiceResult.success(
            "pig_latin", original=sentence, text=convert_to_pig_latin(sentence)
        )

from __future__ import annotations

import enum
from dataclasses import dataclass


class ValidationStatus(enum.Enum):
    OK = "ok"
    OUT_OF_RANGE = "out_of_range"
    MALFORMED = "malformed"


# Redirect codes a web layer would answer with for each outcome.
_SUGGESTED_STATUS_CODES: dict[ValidationStatus, int | None] = {
    ValidationStatus.OK: None,
    ValidationStatus.OUT_OF_RANGE: 307,
    ValidationStatus.MALFORMED: 301,
}


@dataclass(frozen=True)
class ValidationResult:
    status: ValidationStatus
    value: int | None = None
    raw: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is ValidationStatus.OK

    @property
    def suggested_status_code(self) -> int | None:
        return _SUGGESTED_STATUS_CODES[self.status]


def _is_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


class RequestValidator:
    """Classifies raw page / page-size parameters without acting on them.

    ``value`` on a non-ok result is the correction the caller should
    apply; ``None`` there means the parameter should be dropped.
    """

    def validate_page(self, raw: int | str | None, total_pages: int) -> ValidationResult:
        return self._validate(raw, ceiling=total_pages)

    def validate_per_page(self, raw: int | str | None, per_page_max: int) -> ValidationResult:
        return self._validate(raw, ceiling=per_page_max)

    def _validate(self, raw: int | str | None, ceiling: int) -> ValidationResult:
        if raw is None:
            return ValidationResult(ValidationStatus.OK)

        text = str(raw).strip()
        if text.startswith("-") and _is_digits(text[1:]) and int(text[1:]) > 0:
            corrected = min(int(text[1:]), ceiling)
            return ValidationResult(ValidationStatus.MALFORMED, corrected, text)
        if not _is_digits(text) or int(text) == 0:
            return ValidationResult(ValidationStatus.MALFORMED, None, text)

        value = int(text)
        if value > ceiling:
            return ValidationResult(ValidationStatus.OUT_OF_RANGE, ceiling, text)
        return ValidationResult(ValidationStatus.OK, value, text)

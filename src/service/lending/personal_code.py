"""
Personal Code handling for the Loan Decision Engine.

Estonian personal codes (isikukood) have the layout GYYMMDDSSSC:
    G       century and gender (1-2: 1800s, 3-4: 1900s, 5-6: 2000s)
    YYMMDD  date of birth
    SSS     serial number
    C       check digit

Structure and checksum validation is delegated to python-stdnum.
"""

from datetime import date
from typing import Optional

from stdnum.ee import ik

from src.domain.exceptions import InvalidPersonalCodeException
from src.domain.interfaces import PersonalCodeValidator

CENTURY_MARKERS = frozenset("123456")
PERSONAL_CODE_LENGTH = 11


def _is_well_formed(personal_code: Optional[str]) -> bool:
    """Exactly 11 digits with a known century marker, no separators or padding."""
    return (
        bool(personal_code)
        and len(personal_code) == PERSONAL_CODE_LENGTH
        and personal_code.isdigit()
        and personal_code == ik.compact(personal_code)
        and personal_code[0] in CENTURY_MARKERS
    )


class RegularPersonalCodeValidator(PersonalCodeValidator):
    """Validates Estonian personal codes using stdnum.ee.ik."""

    def is_valid(self, personal_code: Optional[str]) -> bool:
        # ik.is_valid compacts its input first, so whitespace must be rejected here
        if not _is_well_formed(personal_code):
            raise InvalidPersonalCodeException()
        if not ik.is_valid(personal_code):
            raise InvalidPersonalCodeException()
        return True

    def extract_birth_date(self, personal_code: Optional[str]) -> date:
        if not _is_well_formed(personal_code):
            raise InvalidPersonalCodeException()
        try:
            return ik.get_birth_date(personal_code)
        except (ValueError, IndexError) as e:
            # stdnum raises InvalidComponent, a ValueError, for impossible dates
            raise InvalidPersonalCodeException(
                f"Invalid birth date in personal ID code: {e}"
            ) from e


def get_segment(personal_code: str) -> int:
    """Return the last two digits of a personal code as an integer (0-99)."""
    return int(personal_code[-2:])


def mask_personal_code(personal_code: Optional[str]) -> str:
    """
    Mask a personal code for logging.

    Keeps the century marker and the segment digits, which is all the
    decision depends on.
    """
    if not personal_code:
        return ""
    if len(personal_code) <= 3:
        return "*" * len(personal_code)
    return personal_code[0] + "*" * (len(personal_code) - 3) + personal_code[-2:]

#!/usr/bin/env python3
"""
Identifier validation for ddlscribe

Names are interpolated into DDL text unquoted (database, login and grant
scope names), so every free-form name is checked against a strict pattern
before a statement is rendered.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from ddlscribe.config.settings import get_config
from ddlscribe.core.errors import InvalidNameError


@dataclass(frozen=True)
class Violation:
    """A single failed rule"""
    rule: str
    message: str

    def __str__(self) -> str:
        return self.message


class NameValidator:
    """Rule-based identifier validator.

    Rules are checked in order and every failure is reported:
    1. Not blank
    2. A string
    3. At most ``max_length`` characters
    4. Letter first, then letters, digits or underscore
    """

    # Pattern for valid identifiers (alphanumeric + underscore only)
    IDENTIFIER_PATTERN = re.compile(r'^[a-zA-Z][a-zA-Z0-9_]*$')

    def __init__(self, max_length: Optional[int] = None):
        self.max_length = max_length if max_length is not None else get_config().max_name_length

    def validate(self, name: str) -> List[Violation]:
        violations = []

        if name is None or not str(name).strip():
            violations.append(Violation('not_blank', 'This value should not be blank.'))
            return violations

        if not isinstance(name, str):
            violations.append(Violation('type', 'This value should be of type string.'))
            return violations

        if len(name) > self.max_length:
            violations.append(Violation(
                'length',
                f'This value is too long. It should have {self.max_length} characters or less.'
            ))

        if not self.IDENTIFIER_PATTERN.fullmatch(name):
            violations.append(Violation('pattern', 'This value is not valid.'))

        return violations


def validate_name(name: str, validator: Optional[NameValidator] = None) -> str:
    """Raise InvalidNameError carrying the first violation, else return the name"""
    validator = validator or NameValidator()
    violations = validator.validate(name)
    if violations:
        raise InvalidNameError(name, violations[0].message)
    return name

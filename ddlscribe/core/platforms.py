"""
Supported target platforms.

A platform is a closed enumeration: every member must have a dialect class
in ``ddlscribe.core.dialects`` and a full row in the privilege mapping table.
"""

from enum import Enum
from typing import List, Union

from ddlscribe.core.errors import UnsupportedPlatformError


class Platform(Enum):
    MYSQL = "MySQL"
    SQLSRV = "SQLSrv"

    @classmethod
    def supported(cls) -> List[str]:
        return [member.value for member in cls]

    @classmethod
    def resolve(cls, value: Union["Platform", str, None]) -> "Platform":
        """Return the Platform for a member or its identifier string"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedPlatformError(value, cls.supported()) from None

    def __str__(self) -> str:
        return self.value

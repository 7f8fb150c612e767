"""
Platform Dialects - platform-specific DDL phrasing

One dialect class per Platform member. The registry is closed: adding a
platform means adding a Platform member, a dialect class here and a row in
ddlscribe.core.privileges.MAPPING_PERMISSION.

Usage:
    from ddlscribe.core.dialects import get_dialect

    dialect = get_dialect("MySQL")
    dialect.create_database_sql("shop")
"""

from typing import Dict, Type, Union

from ddlscribe.core.platforms import Platform

from .base import PlatformDialect
from .mysql_dialect import MySQLDialect
from .sqlsrv_dialect import SQLSrvDialect

DIALECTS: Dict[Platform, Type[PlatformDialect]] = {
    Platform.MYSQL: MySQLDialect,
    Platform.SQLSRV: SQLSrvDialect,
}


def get_dialect(platform: Union[Platform, str]) -> PlatformDialect:
    """Resolve a platform identifier to its dialect (UnsupportedPlatformError otherwise)."""
    return DIALECTS[Platform.resolve(platform)]()


__all__ = [
    "PlatformDialect",
    "MySQLDialect",
    "SQLSrvDialect",
    "DIALECTS",
    "get_dialect",
]

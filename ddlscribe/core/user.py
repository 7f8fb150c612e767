#!/usr/bin/env python3
"""
User / Privilege Statement Generator

Renders CREATE, DROP and GRANT statements for one database principal on one
platform. Rendering is pure: every to_sql_* call reads the user's current
fields and produces the same text until a grant is added.

Usage:
    user = User("jon", "p4sw00rd", platform="SQLSrv")
    user.set_grants(["CREATE", "UPDATE"], "db", "table")
    print(user.to_sql_create())
    print(user.to_sql_privileges())
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from ddlscribe.config.settings import get_config
from ddlscribe.core.dialects import PlatformDialect, get_dialect
from ddlscribe.core.errors import GrantScopeError, UnsupportedPlatformError
from ddlscribe.core.platforms import Platform
from ddlscribe.core.privileges import Permission
from ddlscribe.security.name_validator import NameValidator, validate_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Grant:
    """One permission, optionally scoped to a database or database.table"""
    permission: str
    database: Optional[str] = None
    table: Optional[str] = None


class User:
    """A database principal with a credential and an ordered list of grants."""

    def __init__(
        self,
        name: str,
        password: str,
        platform: Union[Platform, str, None] = None,
        host: Optional[str] = None,
        validator: Optional[NameValidator] = None
    ):
        """
        Args:
            name: Login/user name, validated when statements are rendered
            password: Credential bound at creation
            platform: Target platform; may be set later with set_platform()
            host: MySQL account host (defaults to DDLSCRIBE_MYSQL_USER_HOST)
            validator: Name validator (defaults to NameValidator())
        """
        self.name = name
        self.password = password
        self.host = host if host is not None else get_config().mysql_user_host
        self._validator = validator or NameValidator()
        self._dialect: Optional[PlatformDialect] = None
        self._grants: List[Grant] = []

        if platform is not None:
            self.set_platform(platform)

    @property
    def platform(self) -> Optional[Platform]:
        return self._dialect.platform if self._dialect else None

    @property
    def grants(self) -> Tuple[Grant, ...]:
        return tuple(self._grants)

    def set_platform(self, platform: Union[Platform, str]):
        self._dialect = get_dialect(platform)

    # ==================== Grants ====================

    def set_grant(self, permission: Union[Permission, str],
                  database: Optional[str] = None, table: Optional[str] = None):
        self.set_grants([permission], database, table)

    def set_grants(self, permissions: Iterable[Union[Permission, str]],
                   database: Optional[str] = None, table: Optional[str] = None):
        """Record one grant per permission; nothing is recorded if any check fails."""
        if table is not None and database is None:
            raise GrantScopeError(
                f"Grant on table {table} requires a database",
                {'table': table}
            )
        if database is not None:
            validate_name(database, self._validator)
        if table is not None:
            validate_name(table, self._validator)

        grants = [
            Grant(p.value if isinstance(p, Permission) else p, database, table)
            for p in permissions
        ]
        self._grants.extend(grants)

    # ==================== Statements ====================

    def to_sql_create(self) -> str:
        return self._create_sql(self._require_dialect())

    def to_sql_drop(self) -> str:
        dialect = self._require_dialect()
        validate_name(self.name, self._validator)
        return dialect.drop_user_sql(self.name, self.host)

    def to_sql_privileges(self) -> str:
        return self._privileges_sql(self._require_dialect())

    def render_statements(self, dialect: PlatformDialect) -> List[str]:
        """CREATE statement(s) followed by the grants, if any, rendered for a dialect."""
        parts = [self._create_sql(dialect)]
        privileges = self._privileges_sql(dialect)
        if privileges:
            parts.append(privileges)
        return parts

    def _create_sql(self, dialect: PlatformDialect) -> str:
        validate_name(self.name, self._validator)
        return dialect.create_user_sql(self.name, self.password, self.host)

    def _privileges_sql(self, dialect: PlatformDialect) -> str:
        validate_name(self.name, self._validator)

        statements = []
        for grant in self._grants:
            keyword = dialect.map_permission(grant.permission)
            statements.append(
                dialect.grant_sql(keyword, self.name, self.host, grant.database, grant.table)
            )
        return "\n".join(statements)

    def _require_dialect(self) -> PlatformDialect:
        if self._dialect is None:
            raise UnsupportedPlatformError(None, Platform.supported())
        return self._dialect

    def __repr__(self):
        return f"User(name={self.name!r}, platform={self.platform}, grants={len(self._grants)})"

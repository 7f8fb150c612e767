#!/usr/bin/env python3
"""
ddlscribe Builder - Platform selector and statement assembly

The builder holds one platform for its whole life. Each create_* call
renders one complete statement immediately and appends it to the group for
its kind; to_sql() joins the groups in fixed order: databases, tables, users.

Usage:
    builder = Builder("MySQL")
    builder.create_database("shop")
    builder.create_table(TableIR("orders", [ColumnIR("id", "integer", {"autoincrement": True})]))
    script = builder.to_sql()
"""

import logging
from typing import List, Optional, Tuple, Union

from ddlscribe.core.dialects import PlatformDialect, get_dialect
from ddlscribe.core.errors import UnsupportedPlatformError
from ddlscribe.core.platforms import Platform
from ddlscribe.core.schema_engine import SchemaEngine, SQLAlchemySchemaEngine
from ddlscribe.core.schema_ir import ColumnIR, DatabaseIR, TableIR
from ddlscribe.core.user import User
from ddlscribe.security.name_validator import NameValidator, validate_name

logger = logging.getLogger(__name__)


class Builder:
    """Accumulates DDL for one platform and serializes it into one script."""

    GLUE = "\n"

    def __init__(
        self,
        platform: Union[Platform, str],
        schema_engine: Optional[SchemaEngine] = None,
        validator: Optional[NameValidator] = None
    ):
        self._dialect: PlatformDialect = get_dialect(platform)
        self._schema_engine = schema_engine or SQLAlchemySchemaEngine()
        self._validator = validator or NameValidator()

        self._databases: List[str] = []
        self._tables: List[str] = []
        self._users: List[str] = []

        logger.info(f"Builder ready for {self._dialect.platform.value}")

    @property
    def platform(self) -> Platform:
        return self._dialect.platform

    @property
    def databases(self) -> Tuple[str, ...]:
        return tuple(self._databases)

    @property
    def tables(self) -> Tuple[str, ...]:
        return tuple(self._tables)

    @property
    def users(self) -> Tuple[str, ...]:
        return tuple(self._users)

    def create_database(self, database: Union[DatabaseIR, str]):
        name = database.name if isinstance(database, DatabaseIR) else database
        validate_name(name, self._validator)

        sql = self._dialect.create_database_sql(name)
        self._databases.append(sql)
        logger.debug(f"Queued database statement: {sql}")

    def create_table(self, table: TableIR):
        validate_name(table.name, self._validator)
        for column in table.columns:
            column_name = self._column_name(column)
            if column_name is not None:
                validate_name(column_name, self._validator)

        # schema engine errors propagate unchanged
        sql = self._dialect.render(table, self._schema_engine)
        self._tables.append(sql)
        logger.debug(f"Queued table statement for {table.name}")

    def create_user(self, user: User):
        """Queue the user's CREATE statement(s) followed by its grants.

        A user without a platform is bound to the builder's platform once its
        statements have rendered.
        """
        if user.platform is not None and user.platform is not self.platform:
            raise UnsupportedPlatformError(
                f"{user.platform.value} (builder targets {self.platform.value})",
                [self.platform.value]
            )

        parts = user.render_statements(self._dialect)
        if user.platform is None:
            user.set_platform(self.platform)

        self._users.append(self.GLUE.join(parts))
        logger.debug(f"Queued user statements for {user.name} ({len(user.grants)} grant(s))")

    @staticmethod
    def _column_name(column) -> Optional[str]:
        if isinstance(column, ColumnIR):
            return column.name
        # malformed descriptions are reported by the schema engine
        if isinstance(column, (tuple, list)) and column:
            return column[0]
        return None

    def to_sql(self) -> str:
        groups = [
            self.GLUE.join(group)
            for group in (self._databases, self._tables, self._users)
            if group
        ]
        return self.GLUE.join(groups)

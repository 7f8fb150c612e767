"""
Base Platform Dialect - Abstract base class for platform-specific DDL phrasing

Dialects own the parts of a statement the schema engine does not provide:
- Database collation/charset defaults
- Statement terminators (';' and the SQL Server 'GO' batch separator)
- Principal creation and removal
- GRANT phrasing and permission keywords
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from ddlscribe.core.platforms import Platform
from ddlscribe.core.privileges import Permission, PrivilegeMapper
from ddlscribe.core.schema_engine import SchemaEngine
from ddlscribe.core.schema_ir import TableIR


class PlatformDialect(ABC):
    """
    Abstract base class for platform dialects.

    Usage:
        dialect = get_dialect("SQLSrv")
        sql = dialect.create_database_sql("shop")
        keyword = dialect.map_permission("ALL PRIVILEGES")
    """

    platform: Platform

    # Batch separator emitted on its own line after each statement, if any
    batch_terminator: Optional[str] = None

    # ==================== Database ====================

    @abstractmethod
    def collation_clause(self) -> str:
        """Fixed default collation/charset clause for CREATE DATABASE."""
        pass

    def create_database_sql(self, name: str) -> str:
        return f"CREATE DATABASE {name} {self.collation_clause()};"

    # ==================== Tables ====================

    def render(self, table: TableIR, schema_engine: SchemaEngine) -> str:
        """Render a table through the schema engine, terminated exactly once."""
        sql = schema_engine.render_create_table(
            table.name, table.columns, table.options, self.platform
        ).rstrip()
        if not sql.endswith(';'):
            sql += ';'
        return sql

    # ==================== Users ====================

    def map_permission(self, permission: Union[Permission, str]) -> str:
        return PrivilegeMapper.map_permission(permission, self.platform)

    @abstractmethod
    def create_user_sql(self, name: str, password: str, host: str) -> str:
        """Statement(s) creating the principal and binding its credential."""
        pass

    @abstractmethod
    def drop_user_sql(self, name: str, host: str) -> str:
        pass

    @abstractmethod
    def grant_sql(self, keyword: str, name: str, host: str,
                  database: Optional[str] = None, table: Optional[str] = None) -> str:
        """One GRANT statement for an already mapped permission keyword."""
        pass

    # ==================== Utility Methods ====================

    def terminate(self, statement: str) -> str:
        """Append ';' and, where the platform needs one, the batch separator."""
        sql = f"{statement};"
        if self.batch_terminator:
            sql += f"\n{self.batch_terminator}"
        return sql

    @staticmethod
    def quote_string(value: str) -> str:
        """Single-quoted string literal with embedded quotes doubled."""
        return "'" + str(value).replace("'", "''") + "'"

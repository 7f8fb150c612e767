"""
SQL Server Dialect - SQL-Server-family DDL phrasing
"""

from typing import Optional

from ddlscribe.core.platforms import Platform
from .base import PlatformDialect


class SQLSrvDialect(PlatformDialect):
    """Dialect for SQL Server. Every user/grant statement is its own GO batch."""

    platform = Platform.SQLSRV
    batch_terminator = "GO"

    def collation_clause(self) -> str:
        return "COLLATE latin1_general_100_ci_ai_sc"

    def create_user_sql(self, name: str, password: str, host: str) -> str:
        # host has no meaning for SQL Server logins
        return "\n".join([
            self.terminate(f"CREATE LOGIN {name} WITH PASSWORD = {self.quote_string(password)}"),
            self.terminate(f"CREATE USER {name} FOR LOGIN {name}"),
        ])

    def drop_user_sql(self, name: str, host: str) -> str:
        return self.terminate(f"DROP USER {name}")

    def grant_sql(self, keyword: str, name: str, host: str,
                  database: Optional[str] = None, table: Optional[str] = None) -> str:
        scope = ""
        if database:
            scope = f" ON {database}.{table}" if table else f" ON {database}"
        return self.terminate(f"GRANT {keyword}{scope} TO {name}")

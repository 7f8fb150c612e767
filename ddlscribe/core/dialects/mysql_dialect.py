"""
MySQL Dialect - MySQL-family DDL phrasing
"""

from typing import Optional

from ddlscribe.core.platforms import Platform
from .base import PlatformDialect


class MySQLDialect(PlatformDialect):
    """Dialect for MySQL/MariaDB. Accounts are 'name'@'host' pairs."""

    platform = Platform.MYSQL

    def collation_clause(self) -> str:
        return "CHARACTER SET utf8mb4 COLLATE utf8mb4_general_ci"

    def account(self, name: str, host: str) -> str:
        return f"{self.quote_string(name)}@{self.quote_string(host)}"

    def create_user_sql(self, name: str, password: str, host: str) -> str:
        return self.terminate(
            f"CREATE USER {self.account(name, host)} IDENTIFIED BY {self.quote_string(password)}"
        )

    def drop_user_sql(self, name: str, host: str) -> str:
        return self.terminate(f"DROP USER {self.account(name, host)}")

    def grant_sql(self, keyword: str, name: str, host: str,
                  database: Optional[str] = None, table: Optional[str] = None) -> str:
        # MySQL GRANT always needs an ON clause; missing levels widen to *
        scope = f"{database or '*'}.{table or '*'}"
        return self.terminate(f"GRANT {keyword} ON {scope} TO {self.account(name, host)}")

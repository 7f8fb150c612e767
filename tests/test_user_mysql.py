#!/usr/bin/env python3
"""
MySQL user statement tests

Accounts render as 'name'@'host'; GRANT always carries an ON clause.
"""

import pytest

from ddlscribe.core.errors import InvalidNameError, UnsupportedPlatformError
from ddlscribe.core.privileges import Permission
from ddlscribe.core.user import User


class TestMySQLUser:

    def test_create(self, mysql_user):
        assert mysql_user.to_sql_create() == "CREATE USER 'jon'@'%' IDENTIFIED BY 'p4sw00rd';"

    def test_create_with_host(self):
        user = User("jon", "p4sw00rd", platform="MySQL", host="localhost")
        assert user.to_sql_create() == "CREATE USER 'jon'@'localhost' IDENTIFIED BY 'p4sw00rd';"

    def test_host_from_environment(self, monkeypatch):
        monkeypatch.setenv("DDLSCRIBE_MYSQL_USER_HOST", "10.0.0.%")
        user = User("jon", "p4sw00rd", platform="MySQL")
        assert user.to_sql_drop() == "DROP USER 'jon'@'10.0.0.%';"

    def test_drop(self, mysql_user):
        assert mysql_user.to_sql_drop() == "DROP USER 'jon'@'%';"

    def test_invalid_name(self):
        user = User("jon doe", "p4sw00rd", platform="MySQL")
        with pytest.raises(InvalidNameError) as exc_info:
            user.to_sql_create()
        assert exc_info.value.details['name'] == "jon doe"
        assert str(exc_info.value).startswith("jon doe:\n")

    def test_render_without_platform(self):
        user = User("jon", "p4sw00rd")
        with pytest.raises(UnsupportedPlatformError) as exc_info:
            user.to_sql_create()
        assert "MySQL" in str(exc_info.value)
        assert "SQLSrv" in str(exc_info.value)

    def test_unsupported_platform(self):
        with pytest.raises(UnsupportedPlatformError):
            User("jon", "p4sw00rd", platform="Oracle")


class TestMySQLGrants:

    def test_grant_on_all(self, mysql_user):
        mysql_user.set_grant("ALL PRIVILEGES")
        assert mysql_user.to_sql_privileges() == "GRANT ALL PRIVILEGES ON *.* TO 'jon'@'%';"

    def test_grant_on_database(self, mysql_user):
        mysql_user.set_grant("SELECT", "db")
        assert mysql_user.to_sql_privileges() == "GRANT SELECT ON db.* TO 'jon'@'%';"

    def test_grant_on_table(self, mysql_user):
        mysql_user.set_grant(Permission.GRANT_OPTION, "db", "orders")
        assert mysql_user.to_sql_privileges() == "GRANT GRANT OPTION ON db.orders TO 'jon'@'%';"

    def test_grants_multiple(self, mysql_user):
        mysql_user.set_grants(["INSERT", "DELETE"], "db")
        assert mysql_user.to_sql_privileges() == (
            "GRANT INSERT ON db.* TO 'jon'@'%';\n"
            "GRANT DELETE ON db.* TO 'jon'@'%';"
        )

#!/usr/bin/env python3
"""
Privilege mapping tests
"""

import logging

import pytest

from ddlscribe.core.errors import ErrorCode, UnknownPermissionError
from ddlscribe.core.platforms import Platform
from ddlscribe.core import privileges
from ddlscribe.core.privileges import MAPPING_PERMISSION, Permission, PrivilegeMapper


class TestMappingTable:

    @pytest.mark.parametrize("platform", list(Platform))
    def test_every_permission_mapped(self, platform):
        assert set(MAPPING_PERMISSION[platform]) == set(Permission)

    def test_check_complete(self):
        assert PrivilegeMapper.check_complete() == {}

    def test_check_complete_reports_gaps(self, monkeypatch, caplog):
        partial = dict(MAPPING_PERMISSION)
        partial[Platform.SQLSRV] = {Permission.SELECT: 'SELECT'}
        monkeypatch.setattr(privileges, "MAPPING_PERMISSION", partial)

        with caplog.at_level(logging.WARNING, logger="ddlscribe.core.privileges"):
            missing = PrivilegeMapper.check_complete()

        assert "SELECT" not in missing["SQLSrv"]
        assert "GRANT OPTION" in missing["SQLSrv"]
        assert "MySQL" not in missing
        assert "SQLSrv" in caplog.text

    def test_known_permissions_order(self):
        assert PrivilegeMapper.known_permissions() == [
            "ALL PRIVILEGES", "CREATE", "DROP", "DELETE",
            "INSERT", "SELECT", "UPDATE", "GRANT OPTION",
        ]


class TestMapPermission:

    @pytest.mark.parametrize("permission,mysql,sqlsrv", [
        ("ALL PRIVILEGES", "ALL PRIVILEGES", "ALL"),
        ("CREATE", "CREATE", "CREATE"),
        ("DROP", "DROP", "ALTER"),
        ("DELETE", "DELETE", "DELETE"),
        ("INSERT", "INSERT", "INSERT"),
        ("SELECT", "SELECT", "SELECT"),
        ("UPDATE", "UPDATE", "UPDATE"),
        ("GRANT OPTION", "GRANT OPTION", "CONTROL"),
    ])
    def test_keywords(self, permission, mysql, sqlsrv):
        assert PrivilegeMapper.map_permission(permission, Platform.MYSQL) == mysql
        assert PrivilegeMapper.map_permission(permission, Platform.SQLSRV) == sqlsrv

    def test_accepts_enum(self):
        assert PrivilegeMapper.map_permission(Permission.DROP, Platform.SQLSRV) == "ALTER"

    @pytest.mark.parametrize("tag", ["TRUNCATE", "select", "", "ALL"])
    def test_unknown_tag(self, tag):
        with pytest.raises(UnknownPermissionError) as exc_info:
            PrivilegeMapper.map_permission(tag, Platform.MYSQL)
        error = exc_info.value
        assert error.code == ErrorCode.UNKNOWN_PERMISSION
        assert error.details['permission'] == tag
        assert "ALL PRIVILEGES" in str(error)

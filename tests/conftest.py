#!/usr/bin/env python3
"""
ddlscribe Test Configuration - PyTest Configuration and Fixtures

Shared fixtures: a recording fake schema engine, platform-bound users and a
configuration reset so environment overrides never leak between tests.
"""

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ddlscribe.config.settings import ConfigManager
from ddlscribe.core.errors import ColumnDefinitionError
from ddlscribe.core.schema_engine import SchemaEngine
from ddlscribe.core.user import User


class RecordingSchemaEngine(SchemaEngine):
    """Fake engine: records every call and renders a compact, unterminated statement"""

    def __init__(self, fail_with: Exception = None):
        self.calls = []
        self.fail_with = fail_with

    def render_create_table(self, name, columns, options, platform):
        columns = list(columns)
        self.calls.append((name, columns, options, platform))
        if self.fail_with is not None:
            raise self.fail_with
        return f"CREATE TABLE {name} ({', '.join(c.name for c in columns)})"


@pytest.fixture(autouse=True)
def fresh_config():
    """Re-read DDLSCRIBE_* variables for every test"""
    ConfigManager.reset()
    yield
    ConfigManager.reset()


@pytest.fixture
def fake_engine():
    return RecordingSchemaEngine()


@pytest.fixture
def srv_user():
    return User("jon", "p4sw00rd", platform="SQLSrv")


@pytest.fixture
def mysql_user():
    return User("jon", "p4sw00rd", platform="MySQL")


@pytest.fixture
def failing_engine():
    return RecordingSchemaEngine(fail_with=ColumnDefinitionError("bad column"))

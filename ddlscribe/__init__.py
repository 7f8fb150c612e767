#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ddlscribe - multi-dialect DDL generation

Exports the main components for clean imports

Version: 0.1.0
"""

from ddlscribe.core.builder import Builder
from ddlscribe.core.errors import (
    ColumnDefinitionError,
    DDLError,
    ErrorCode,
    GrantScopeError,
    InvalidNameError,
    UnknownPermissionError,
    UnsupportedPlatformError,
)
from ddlscribe.core.platforms import Platform
from ddlscribe.core.privileges import Permission
from ddlscribe.core.schema_engine import SchemaEngine, SQLAlchemySchemaEngine
from ddlscribe.core.schema_ir import ColumnIR, DatabaseIR, TableIR
from ddlscribe.core.type_registry import ColumnType
from ddlscribe.core.user import Grant, User

__version__ = "0.1.0"

__all__ = [
    "Builder",
    "User",
    "Grant",
    "Platform",
    "Permission",
    "ColumnType",
    "ColumnIR",
    "TableIR",
    "DatabaseIR",
    "SchemaEngine",
    "SQLAlchemySchemaEngine",
    "DDLError",
    "ErrorCode",
    "UnsupportedPlatformError",
    "UnknownPermissionError",
    "InvalidNameError",
    "GrantScopeError",
    "ColumnDefinitionError",
]

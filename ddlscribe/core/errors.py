#!/usr/bin/env python3
"""
ddlscribe Error Hierarchy
Canonical exception classes for statement generation.
"""

from enum import Enum
from typing import Iterable


class ErrorCode(Enum):
    UNKNOWN = "UNKNOWN_ERROR"
    UNSUPPORTED_PLATFORM = "UNSUPPORTED_PLATFORM"
    UNKNOWN_PERMISSION = "UNKNOWN_PERMISSION"
    INVALID_NAME = "INVALID_NAME"
    INVALID_SCOPE = "INVALID_SCOPE"
    SCHEMA_DEFINITION = "SCHEMA_DEFINITION"


class DDLError(Exception):
    """Base class for all ddlscribe exceptions"""
    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN, details: dict = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


class UnsupportedPlatformError(DDLError):
    """Raised when a platform identifier is not one of the supported variants"""
    def __init__(self, platform, supported: Iterable[str]):
        supported = list(supported)
        message = f"Platform {platform} not supported, try: {', '.join(supported)}"
        details = {'platform': platform, 'supported': supported}
        super().__init__(message, ErrorCode.UNSUPPORTED_PLATFORM, details)


class UnknownPermissionError(DDLError):
    """Raised when a permission tag has no mapping for the target platform"""
    def __init__(self, permission, platform: str, known: Iterable[str]):
        known = list(known)
        message = (
            f"Permission {permission} unknown for platform {platform}, "
            f"try: {', '.join(known)}"
        )
        details = {'permission': permission, 'platform': platform, 'known': known}
        super().__init__(message, ErrorCode.UNKNOWN_PERMISSION, details)


class InvalidNameError(DDLError):
    """Raised when an identifier fails name validation"""
    def __init__(self, name: str, violation: str):
        message = f"{name}:\n{violation}"
        details = {'name': name, 'violation': violation}
        super().__init__(message, ErrorCode.INVALID_NAME, details)


class GrantScopeError(DDLError):
    """Raised when a grant names a table without its database"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, ErrorCode.INVALID_SCOPE, details)


class ColumnDefinitionError(DDLError):
    """Raised by the schema engine for malformed table or column descriptions"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message, ErrorCode.SCHEMA_DEFINITION, details)

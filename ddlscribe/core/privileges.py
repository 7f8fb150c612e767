"""
Privilege Mapper

Grant keywords differ between dialects, so every abstract permission is
looked up in a fixed per-platform table before a GRANT is rendered.
"""

import logging
from enum import Enum
from typing import Dict, List, Union

from ddlscribe.core.errors import UnknownPermissionError
from ddlscribe.core.platforms import Platform

logger = logging.getLogger(__name__)


class Permission(Enum):
    ALL_PRIVILEGES = "ALL PRIVILEGES"
    CREATE = "CREATE"
    DROP = "DROP"
    DELETE = "DELETE"
    INSERT = "INSERT"
    SELECT = "SELECT"
    UPDATE = "UPDATE"
    GRANT_OPTION = "GRANT OPTION"


# Platform -> Permission -> grant keyword
MAPPING_PERMISSION: Dict[Platform, Dict[Permission, str]] = {
    Platform.MYSQL: {
        Permission.ALL_PRIVILEGES: 'ALL PRIVILEGES',
        Permission.CREATE: 'CREATE',
        Permission.DROP: 'DROP',
        Permission.DELETE: 'DELETE',
        Permission.INSERT: 'INSERT',
        Permission.SELECT: 'SELECT',
        Permission.UPDATE: 'UPDATE',
        Permission.GRANT_OPTION: 'GRANT OPTION',
    },
    Platform.SQLSRV: {
        Permission.ALL_PRIVILEGES: 'ALL',
        Permission.CREATE: 'CREATE',
        Permission.DROP: 'ALTER',
        Permission.DELETE: 'DELETE',
        Permission.INSERT: 'INSERT',
        Permission.SELECT: 'SELECT',
        Permission.UPDATE: 'UPDATE',
        Permission.GRANT_OPTION: 'CONTROL',
    },
}


class PrivilegeMapper:
    """Pure lookup: permission tag x platform -> grant keyword"""

    @staticmethod
    def known_permissions() -> List[str]:
        return [permission.value for permission in Permission]

    @staticmethod
    def map_permission(permission: Union[Permission, str], platform: Platform) -> str:
        tag = permission.value if isinstance(permission, Permission) else permission
        try:
            resolved = Permission(tag)
        except ValueError:
            raise UnknownPermissionError(tag, platform.value, PrivilegeMapper.known_permissions()) from None

        keyword = MAPPING_PERMISSION.get(platform, {}).get(resolved)
        if keyword is None:
            raise UnknownPermissionError(tag, platform.value, PrivilegeMapper.known_permissions())
        return keyword

    @staticmethod
    def check_complete() -> Dict[str, List[str]]:
        """Report permissions missing from each platform's table (empty when total)"""
        missing = {}
        for platform in Platform:
            table = MAPPING_PERMISSION.get(platform, {})
            gaps = [p.value for p in Permission if p not in table]
            if gaps:
                logger.warning(f"Privilege table for {platform.value} is missing: {', '.join(gaps)}")
                missing[platform.value] = gaps
        return missing

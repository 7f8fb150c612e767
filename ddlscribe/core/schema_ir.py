from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from ddlscribe.core.type_registry import ColumnType


@dataclass
class ColumnIR:
    """Column description: name, abstract type tag, type-specific options"""
    name: str
    type: Union[ColumnType, str]
    options: Dict[str, Any] = field(default_factory=dict)

    @property
    def type_tag(self) -> str:
        return self.type.value if isinstance(self.type, ColumnType) else str(self.type)

    def as_tuple(self) -> Tuple[str, str, Dict[str, Any]]:
        return (self.name, self.type_tag, dict(self.options))


@dataclass
class TableIR:
    """Table description in IR"""
    name: str
    columns: List[ColumnIR] = field(default_factory=list)
    options: Dict[str, Any] = field(default_factory=dict)

    def add_column(self, name: str, type: Union[ColumnType, str], options: Optional[Dict[str, Any]] = None) -> 'TableIR':
        self.columns.append(ColumnIR(name, type, options or {}))
        return self


@dataclass
class DatabaseIR:
    """Database description in IR"""
    name: str

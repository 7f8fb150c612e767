from enum import Enum
from typing import Any, Callable, Dict, Union

from sqlalchemy import types as sqltypes
from sqlalchemy.dialects import mssql, mysql

from ddlscribe.core.errors import ColumnDefinitionError
from ddlscribe.core.platforms import Platform


class ColumnType(Enum):
    # Numeric
    SMALLINT = "smallint"
    INTEGER = "integer"
    BIGINT = "bigint"
    DECIMAL = "decimal"  # With precision/scale
    FLOAT = "float"

    # String
    STRING = "string"  # VARCHAR, CHAR when fixed
    TEXT = "text"

    # Binary
    BLOB = "blob"

    # Date/Time
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"

    # Boolean
    BOOLEAN = "boolean"

    # Special
    GUID = "guid"
    JSON = "json"


# Options consumed by the type itself; every other accepted option shapes the column
TYPE_OPTIONS = {'length', 'precision', 'scale', 'unsigned', 'fixed', 'charset', 'collation'}
COLUMN_OPTIONS = {'notnull', 'default', 'autoincrement', 'primary', 'comment'}

DEFAULT_STRING_LENGTH = 255
DEFAULT_DECIMAL_PRECISION = 10
DEFAULT_DECIMAL_SCALE = 0

STRING_TYPES = (ColumnType.STRING, ColumnType.TEXT)
INTEGER_TYPES = (ColumnType.SMALLINT, ColumnType.INTEGER, ColumnType.BIGINT)


def _string(platform: Platform, opts: Dict[str, Any]) -> sqltypes.TypeEngine:
    length = opts.get('length', DEFAULT_STRING_LENGTH)
    if platform is Platform.MYSQL:
        type_ = mysql.CHAR if opts.get('fixed') else mysql.VARCHAR
        return type_(length, charset=opts.get('charset'), collation=opts.get('collation'))
    type_ = sqltypes.CHAR if opts.get('fixed') else sqltypes.VARCHAR
    return type_(length, collation=opts.get('collation'))


def _text(platform: Platform, opts: Dict[str, Any]) -> sqltypes.TypeEngine:
    if platform is Platform.MYSQL:
        return mysql.TEXT(charset=opts.get('charset'), collation=opts.get('collation'))
    return sqltypes.Text(collation=opts.get('collation'))


def _integer(mysql_type, generic_type) -> Callable[[Platform, Dict[str, Any]], sqltypes.TypeEngine]:
    def factory(platform: Platform, opts: Dict[str, Any]) -> sqltypes.TypeEngine:
        if platform is Platform.MYSQL:
            return mysql_type(unsigned=bool(opts.get('unsigned', False)))
        return generic_type()
    return factory


def _decimal(platform: Platform, opts: Dict[str, Any]) -> sqltypes.TypeEngine:
    return sqltypes.Numeric(
        precision=opts.get('precision', DEFAULT_DECIMAL_PRECISION),
        scale=opts.get('scale', DEFAULT_DECIMAL_SCALE),
    )


def _guid(platform: Platform, opts: Dict[str, Any]) -> sqltypes.TypeEngine:
    if platform is Platform.MYSQL:
        return mysql.CHAR(36)
    return mssql.UNIQUEIDENTIFIER()


class TypeRegistry:
    # Abstract type -> SQLAlchemy type factory; the dialect compiler picks native names
    TYPE_FACTORIES: Dict[ColumnType, Callable[[Platform, Dict[str, Any]], sqltypes.TypeEngine]] = {
        ColumnType.SMALLINT: _integer(mysql.SMALLINT, sqltypes.SmallInteger),
        ColumnType.INTEGER: _integer(mysql.INTEGER, sqltypes.Integer),
        ColumnType.BIGINT: _integer(mysql.BIGINT, sqltypes.BigInteger),
        ColumnType.DECIMAL: _decimal,
        ColumnType.FLOAT: lambda platform, opts: sqltypes.Float(),
        ColumnType.STRING: _string,
        ColumnType.TEXT: _text,
        ColumnType.BLOB: lambda platform, opts: sqltypes.LargeBinary(),
        ColumnType.DATE: lambda platform, opts: sqltypes.Date(),
        ColumnType.TIME: lambda platform, opts: sqltypes.Time(),
        ColumnType.DATETIME: lambda platform, opts: sqltypes.DateTime(),
        ColumnType.BOOLEAN: lambda platform, opts: sqltypes.Boolean(create_constraint=False),
        ColumnType.GUID: _guid,
        ColumnType.JSON: lambda platform, opts: sqltypes.JSON(),
    }

    @staticmethod
    def resolve_type(type_tag: Union[ColumnType, str]) -> ColumnType:
        if isinstance(type_tag, ColumnType):
            return type_tag
        try:
            return ColumnType(str(type_tag).lower().strip())
        except ValueError:
            known = ', '.join(t.value for t in ColumnType)
            raise ColumnDefinitionError(
                f"Unknown column type '{type_tag}', try: {known}",
                {'type': type_tag}
            ) from None

    @staticmethod
    def check_options(column_name: str, options: Dict[str, Any]):
        unknown = sorted(set(options) - TYPE_OPTIONS - COLUMN_OPTIONS)
        if unknown:
            raise ColumnDefinitionError(
                f"Column '{column_name}': option(s) {', '.join(unknown)} not supported",
                {'column': column_name, 'options': unknown}
            )
        for key in ('length', 'precision', 'scale'):
            value = options.get(key)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ColumnDefinitionError(
                    f"Column '{column_name}': option {key} must be a non-negative integer, got {value!r}",
                    {'column': column_name, 'option': key, 'value': value}
                )
        if options.get('length') == 0:
            raise ColumnDefinitionError(
                f"Column '{column_name}': option length must be positive",
                {'column': column_name, 'option': 'length', 'value': 0}
            )

    @staticmethod
    def map_to_sqlalchemy(type_tag: Union[ColumnType, str], platform: Platform,
                          options: Dict[str, Any]) -> sqltypes.TypeEngine:
        """Map an abstract column type plus its options to a SQLAlchemy type"""
        column_type = TypeRegistry.resolve_type(type_tag)
        type_options = {k: v for k, v in options.items() if k in TYPE_OPTIONS}
        return TypeRegistry.TYPE_FACTORIES[column_type](platform, type_options)

    @staticmethod
    def is_string_type(type_tag: Union[ColumnType, str]) -> bool:
        return TypeRegistry.resolve_type(type_tag) in STRING_TYPES

    @staticmethod
    def is_integer_type(type_tag: Union[ColumnType, str]) -> bool:
        return TypeRegistry.resolve_type(type_tag) in INTEGER_TYPES

#!/usr/bin/env python3
"""
Schema engine - CREATE TABLE rendering

The builder never assembles CREATE TABLE text itself. It hands a table name,
its columns and its default options to a SchemaEngine bound to the target
platform and appends whatever single statement comes back.

SQLAlchemySchemaEngine is the default implementation: it builds a throwaway
sqlalchemy.Table and compiles sqlalchemy.schema.CreateTable against the
MySQL or MSSQL dialect, so identifier quoting and native type names come from
SQLAlchemy's dialect compilers.
"""

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from sqlalchemy import Column, MetaData, Table, text
from sqlalchemy.dialects import mssql, mysql
from sqlalchemy.engine import Dialect
from sqlalchemy.schema import CreateTable

from ddlscribe.core.errors import ColumnDefinitionError
from ddlscribe.core.platforms import Platform
from ddlscribe.core.schema_ir import ColumnIR
from ddlscribe.core.type_registry import TypeRegistry

logger = logging.getLogger(__name__)

# SQL Server 2012; the offline dialect otherwise compiles DATE and TIME as DATETIME
MSSQL_SERVER_VERSION = (11,)

ColumnSpec = Union[ColumnIR, Tuple[str, str, Dict[str, Any]]]


class SchemaEngine(ABC):
    """Renders one CREATE TABLE statement for a platform"""

    @abstractmethod
    def render_create_table(
        self,
        name: str,
        columns: Iterable[ColumnSpec],
        options: Optional[Dict[str, Any]],
        platform: Platform
    ) -> str:
        """
        Render a CREATE TABLE statement.

        Args:
            name: Table name
            columns: Ordered (name, type, options) column descriptions
            options: Default table options (engine, charset, collation, comment)
            platform: Target platform

        Returns:
            One statement, terminated with ';'
        """
        pass


def _mssql_dialect() -> Dialect:
    # large types resolve to VARCHAR(max)/VARBINARY(max) without a live server
    dialect = mssql.dialect(deprecate_large_types=True)
    dialect.server_version_info = MSSQL_SERVER_VERSION
    return dialect


class SQLAlchemySchemaEngine(SchemaEngine):
    """SchemaEngine backed by SQLAlchemy's DDL compiler"""

    DIALECTS = {
        Platform.MYSQL: mysql.dialect,
        Platform.SQLSRV: _mssql_dialect,
    }

    # table option -> Table() keyword, per platform
    TABLE_OPTIONS = {
        Platform.MYSQL: {
            'engine': 'mysql_engine',
            'charset': 'mysql_charset',
            'collation': 'mysql_collate',
            'collate': 'mysql_collate',
            'comment': 'comment',
        },
        Platform.SQLSRV: {},
    }

    # table options string columns inherit unless they set their own
    INHERITED_COLUMN_OPTIONS = {
        Platform.MYSQL: ('charset', 'collation'),
        Platform.SQLSRV: ('collation',),
    }

    # platforms whose CREATE TABLE carries table and column comments inline
    INLINE_COMMENTS = (Platform.MYSQL,)

    def __init__(self):
        self._dialects: Dict[Platform, Dialect] = {}

    def dialect_for(self, platform: Platform) -> Dialect:
        if platform not in self._dialects:
            self._dialects[platform] = self.DIALECTS[platform]()
        return self._dialects[platform]

    def render_create_table(self, name, columns, options, platform) -> str:
        platform = Platform.resolve(platform)
        table_options = dict(options or {})
        specs = [self._as_spec(column) for column in columns]

        if not specs:
            raise ColumnDefinitionError(f"Table '{name}' has no columns", {'table': name})

        seen = set()
        for column_name, _, _ in specs:
            if column_name in seen:
                raise ColumnDefinitionError(
                    f"Table '{name}': duplicate column '{column_name}'",
                    {'table': name, 'column': column_name}
                )
            seen.add(column_name)

        metadata = MetaData()
        sa_columns = [
            self._build_column(platform, column_name, type_tag, column_options, table_options)
            for column_name, type_tag, column_options in specs
        ]
        table = Table(name, metadata, *sa_columns, **self._table_kwargs(platform, name, table_options))

        ddl = str(CreateTable(table).compile(dialect=self.dialect_for(platform))).strip()
        logger.debug(f"Rendered CREATE TABLE {name} for {platform.value}")
        return ddl + ';'

    def _as_spec(self, column: ColumnSpec) -> Tuple[str, str, Dict[str, Any]]:
        if isinstance(column, ColumnIR):
            return column.as_tuple()
        try:
            column_name, type_tag, column_options = column
        except (TypeError, ValueError):
            raise ColumnDefinitionError(
                f"Column description must be (name, type, options), got {column!r}",
                {'column': column}
            ) from None
        return column_name, type_tag, dict(column_options or {})

    def _build_column(self, platform: Platform, name: str, type_tag, options: Dict[str, Any],
                      table_options: Dict[str, Any]) -> Column:
        if not name:
            raise ColumnDefinitionError("Column name must not be empty", {'column': name})

        opts = dict(options)
        TypeRegistry.check_options(name, opts)

        if TypeRegistry.is_string_type(type_tag):
            defaults = dict(table_options)
            if 'collation' not in defaults and 'collate' in defaults:
                defaults['collation'] = defaults['collate']
            for key in self.INHERITED_COLUMN_OPTIONS[platform]:
                if key not in opts and defaults.get(key):
                    opts[key] = defaults[key]

        autoincrement = bool(opts.get('autoincrement', False))
        if autoincrement and not TypeRegistry.is_integer_type(type_tag):
            raise ColumnDefinitionError(
                f"Column '{name}': autoincrement requires an integer type, got {type_tag}",
                {'column': name, 'type': type_tag}
            )

        primary = bool(opts.get('primary', False)) or autoincrement
        nullable = not opts.get('notnull', True) and not primary

        comment = opts.get('comment')
        if comment is not None and platform not in self.INLINE_COMMENTS:
            logger.warning(f"Column '{name}': comment ignored on {platform.value}")
            comment = None

        return Column(
            name,
            TypeRegistry.map_to_sqlalchemy(type_tag, platform, opts),
            primary_key=primary,
            nullable=nullable,
            autoincrement=autoincrement,
            server_default=self._server_default(opts.get('default')),
            comment=comment,
        )

    @staticmethod
    def _server_default(value: Any):
        if value is None:
            return None
        if isinstance(value, bool):
            return text('1' if value else '0')
        if isinstance(value, (int, float, Decimal)):
            return text(str(value))
        return str(value)

    def _table_kwargs(self, platform: Platform, name: str, table_options: Dict[str, Any]) -> Dict[str, Any]:
        mapping = self.TABLE_OPTIONS[platform]
        inherited = set(self.INHERITED_COLUMN_OPTIONS[platform]) | {'collate'}
        kwargs = {}
        ignored: List[str] = []
        for key, value in table_options.items():
            keyword = mapping.get(key)
            if keyword is None:
                if key not in inherited:
                    ignored.append(key)
                continue
            if value is not None:
                kwargs[keyword] = value
        if ignored:
            logger.warning(f"Table '{name}': option(s) {', '.join(sorted(ignored))} ignored on {platform.value}")
        return kwargs

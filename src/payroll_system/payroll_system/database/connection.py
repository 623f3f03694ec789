from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "DBConfig":
        """Build from a settings module's DB_CONFIG dict; port defaults to 3306."""
        return cls(
            host=str(values["host"]),
            port=int(values.get("port") or 3306),
            user=str(values["user"]),
            password=str(values.get("password") or ""),
            database=str(values["database"]),
        )


class DatabaseConnection:
    """Connection factory for the payroll database.

    Repositories open one connection per call through db_cursor; each app
    container owns its own factory, so test and production settings never mix.
    """

    def __init__(self, config: DBConfig):
        self._config = config

    def connect(self):
        return mysql.connector.connect(
            host=self._config.host,
            port=self._config.port,
            user=self._config.user,
            password=self._config.password,
            database=self._config.database,
        )

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "hr_management"

    @classmethod
    def from_dict(cls, values: dict[str, Any]) -> "DBConfig":
        """Build from the DB_CONFIG settings dict; missing keys keep the defaults."""
        known = {k: values[k] for k in cls.__dataclass_fields__ if values.get(k) is not None}
        if "port" in known:
            known["port"] = int(known["port"])
        return cls(**known)


class DatabaseConnection:
    """Process-wide connection factory for the MySQL record store.

    Every store operation opens its own connection, so worker threads used by
    bulk attendance marking never share one.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self._config = config

    @property
    def config(self) -> DBConfig:
        return self._config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None or cls._instance.config != config:
            cls._instance = cls(config)
        return cls._instance

    def connect(self, *, with_database: bool = True):
        # with_database=False is used once, to create the schema itself
        params: dict[str, Any] = {
            "host": self._config.host,
            "port": self._config.port,
            "user": self._config.user,
            "password": self._config.password,
            "autocommit": False,
        }
        if with_database:
            params["database"] = self._config.database
        return mysql.connector.connect(**params)

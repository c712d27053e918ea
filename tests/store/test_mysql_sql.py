from decimal import Decimal

import pytest

from src.hr_management.hr_management.database.connection import DBConfig
from src.hr_management.hr_management.database.mysql_base import fetchall
from src.hr_management.hr_management.store.model import WhereClause
from src.hr_management.hr_management.store.mysql_store import _columns, _where_sql


def test_columns_default_to_table_fields():
    assert _columns("attendance") == ["employee_id", "date", "status", "check_in", "check_out"]
    assert _columns("attendance", ["id", "status"]) == ["status"]


def test_columns_reject_unknown_names():
    with pytest.raises(ValueError):
        _columns("attendance", ["status; DROP TABLE employees"])
    with pytest.raises(ValueError):
        _columns("payroll")


def test_where_sql():
    sql, params = _where_sql(
        "attendance",
        [
            WhereClause.equal_to("employee_id", "1", "2"),
            WhereClause.at_least("date", "2026-02-01"),
            WhereClause.at_most("date", "2026-02-28"),
        ],
    )

    assert sql == " WHERE `employee_id` IN (%s, %s) AND `date` >= %s AND `date` <= %s"
    assert params == ["1", "2", "2026-02-01", "2026-02-28"]


def test_where_sql_contains_and_empty():
    sql, params = _where_sql("employees", [WhereClause.contains("first_name", "Sar")])
    assert sql == " WHERE LOWER(`first_name`) LIKE %s"
    assert params == ["%sar%"]

    assert _where_sql("employees", []) == ("", [])
    assert _where_sql("employees", [WhereClause.equal_to("status")])[0] == " WHERE 1=0"


def test_rows_are_normalized_to_plain_values():
    class Cursor:
        def fetchall(self):
            return [{"id": 1, "score": Decimal("4.50"), "quarter": bytearray(b"Q3 2024")}]

    assert fetchall(Cursor()) == [{"id": 1, "score": 4.5, "quarter": "Q3 2024"}]


def test_db_config_from_settings_dict():
    cfg = DBConfig.from_dict({"host": "db", "port": "3307", "password": None})

    assert (cfg.host, cfg.port, cfg.password, cfg.database) == ("db", 3307, "", "hr_management")

from __future__ import annotations

import logging

from ..core.constants import (
    ATTENDANCE_TABLE,
    DEPARTMENTS_TABLE,
    EMPLOYEES_TABLE,
    PERFORMANCE_TABLE,
    PROJECT_ASSIGNMENTS_TABLE,
    PROJECTS_TABLE,
    REPORT_SCHEDULES_TABLE,
)
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall

logger = logging.getLogger(__name__)

# Relationships are resolved by the application; no foreign keys so deleting an
# employee never cascades into attendance or reviews.
SCHEMA: dict[str, str] = {
    EMPLOYEES_TABLE: """
        CREATE TABLE IF NOT EXISTS employees (
            id INT AUTO_INCREMENT PRIMARY KEY,
            first_name VARCHAR(100) NOT NULL,
            last_name VARCHAR(100) NOT NULL,
            email VARCHAR(255) NOT NULL,
            department VARCHAR(50) NULL,
            position VARCHAR(255) NULL,
            status VARCHAR(20) NOT NULL DEFAULT 'Active',
            hire_date VARCHAR(10) NULL
        )
    """,
    DEPARTMENTS_TABLE: """
        CREATE TABLE IF NOT EXISTS departments (
            id INT AUTO_INCREMENT PRIMARY KEY,
            name VARCHAR(100) NOT NULL
        )
    """,
    ATTENDANCE_TABLE: """
        CREATE TABLE IF NOT EXISTS attendance (
            id INT AUTO_INCREMENT PRIMARY KEY,
            employee_id VARCHAR(64) NOT NULL,
            date VARCHAR(10) NOT NULL,
            status VARCHAR(20) NOT NULL,
            check_in VARCHAR(5) NOT NULL DEFAULT '',
            check_out VARCHAR(5) NOT NULL DEFAULT '',
            INDEX idx_attendance_employee_date (employee_id, date)
        )
    """,
    PERFORMANCE_TABLE: """
        CREATE TABLE IF NOT EXISTS performance_reviews (
            id INT AUTO_INCREMENT PRIMARY KEY,
            employee_id VARCHAR(64) NOT NULL,
            quarter VARCHAR(20) NULL,
            score DECIMAL(4,2) NOT NULL,
            review_date VARCHAR(10) NULL,
            goals TEXT NULL
        )
    """,
    PROJECTS_TABLE: """
        CREATE TABLE IF NOT EXISTS projects (
            id INT AUTO_INCREMENT PRIMARY KEY,
            name VARCHAR(255) NOT NULL,
            status VARCHAR(20) NOT NULL DEFAULT 'Planning',
            progress INT NOT NULL DEFAULT 0,
            end_date VARCHAR(10) NULL,
            description TEXT NULL
        )
    """,
    PROJECT_ASSIGNMENTS_TABLE: """
        CREATE TABLE IF NOT EXISTS project_assignments (
            id INT AUTO_INCREMENT PRIMARY KEY,
            employee_id VARCHAR(64) NOT NULL,
            project_id VARCHAR(64) NOT NULL,
            INDEX idx_assignment_project (project_id)
        )
    """,
    REPORT_SCHEDULES_TABLE: """
        CREATE TABLE IF NOT EXISTS report_schedules (
            id INT AUTO_INCREMENT PRIMARY KEY,
            frequency VARCHAR(20) NOT NULL,
            email VARCHAR(255) NOT NULL,
            enabled TINYINT(1) NOT NULL DEFAULT 0
        )
    """,
}


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    name = conn_factory.config.database
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(f"CREATE DATABASE IF NOT EXISTS `{name}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection) -> None:
    """Create every table (idempotent: CREATE IF NOT EXISTS)."""
    ensure_database_exists(conn_factory)
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        for table, ddl in SCHEMA.items():
            cur.execute(ddl)
            logger.debug("Ensured table %s", table)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [r[0] for r in fetchall(cur)]

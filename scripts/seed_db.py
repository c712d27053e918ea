from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_management.hr_management.container import build_container, build_store

DEMO_EMPLOYEES = [
    dict(first_name="Sarah", last_name="Johnson", email="sarah.j@company.com", department="Engineering",
         position="Senior Developer", hire_date="2022-03-15"),
    dict(first_name="Michael", last_name="Chen", email="michael.c@company.com", department="Design",
         position="UI/UX Designer", hire_date="2023-01-20"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_store(backend=settings.STORE_BACKEND, db_config=dict(settings.DB_CONFIG), auto_init_db=True)
    container = build_container(store=store)

    sarah, michael = [container.employee_service.create(**e) for e in DEMO_EMPLOYEES]

    container.project_service.create(
        name="Mobile App Redesign", status="In Progress", progress=75, end_date="2024-12-31",
        employee_ids=[sarah.employee_id, michael.employee_id],
    )
    container.project_service.create(
        name="HR Dashboard", status="Planning", progress=30, end_date="2024-11-15",
        employee_ids=[sarah.employee_id],
    )

    container.performance_service.create(
        employee_id=sarah.employee_id, quarter="Q3 2024", score=4.2, review_date="2024-09-15",
        goals="Improve team collaboration",
    )
    container.performance_service.create(
        employee_id=michael.employee_id, quarter="Q3 2024", score=4.5, review_date="2024-09-20",
        goals="Lead design system project",
    )

    for name in ("Engineering", "Design", "Marketing", "Sales", "HR", "Finance"):
        container.department_service.create(name)

    print("OK: Seeded demo employees, projects, reviews and departments")


if __name__ == "__main__":
    main()

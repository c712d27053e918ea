"""Example: drive the service layer directly (no Flask).

Controllers are thin; the attendance rules live in the services.
"""

from src.hr_management.hr_management.container import build_container
from src.hr_management.hr_management.store.memory_store import InMemoryRecordStore


def main():
    container = build_container(store=InMemoryRecordStore())
    employee = container.employee_service.create(first_name="Ada", last_name="Lovelace", email="ada@example.com")

    print(container.attendance_service.toggle(employee.employee_id).to_dict())
    print(container.attendance_service.toggle(employee.employee_id).to_dict())
    print(container.analytics_service.kpis().to_dict())


if __name__ == "__main__":
    main()

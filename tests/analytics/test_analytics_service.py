from src.hr_management.hr_management.core.constants import ATTENDANCE_TABLE


def _attendance(store, employee_id, day, status="Present", check_in="09:00", check_out="17:00"):
    store.create(
        ATTENDANCE_TABLE,
        [{"employee_id": employee_id, "date": day, "status": status, "check_in": check_in, "check_out": check_out}],
    )


def test_kpis(container, store, make_employee):
    a = make_employee("Ann", department="Engineering")
    b = make_employee("Bob", department="Design")
    _attendance(store, a.employee_id, "2026-02-02")
    _attendance(store, b.employee_id, "2026-02-02", status="Late")
    container.project_service.create(name="Mobile", end_date="2024-12-31", progress=75, status="In Progress")
    container.project_service.create(name="Done", end_date="2024-10-30", progress=100, status="Completed")
    container.performance_service.create(employee_id=a.employee_id, quarter="Q3 2024", score=4.0)
    container.performance_service.create(employee_id=b.employee_id, quarter="Q3 2024", score=5.0)
    container.department_service.create("Engineering")
    container.department_service.create("Finance")

    kpis = container.analytics_service.kpis()

    assert kpis.total_employees == 2
    assert kpis.attendance_rate == 50.0
    assert kpis.project_completion_rate == 87.5
    assert kpis.avg_performance_score == 4.5
    assert kpis.active_projects == 1
    assert kpis.department_count == 3


def test_kpis_on_empty_store(container):
    kpis = container.analytics_service.kpis()

    assert kpis.attendance_rate == 0
    assert kpis.project_completion_rate == 0
    assert kpis.avg_performance_score == 0


def test_employee_summaries(container, store, make_employee):
    a = make_employee("Ann")
    b = make_employee("Bob")
    _attendance(store, a.employee_id, "2026-02-01")
    _attendance(store, a.employee_id, "2026-02-02", status="Absent", check_in="", check_out="")
    container.performance_service.create(employee_id=a.employee_id, quarter="Q1", score=4.0)
    container.performance_service.create(employee_id=a.employee_id, quarter="Q2", score=5.0)
    container.project_service.create(name="P", end_date="2026-03-01", employee_ids=[a.employee_id])

    rows = {r["employee_id"]: r for r in container.analytics_service.employee_summaries()}

    assert rows[a.employee_id]["attendance_rate"] == "50.0"
    assert rows[a.employee_id]["performance_average"] == "4.5"
    assert rows[a.employee_id]["projects"] == 1
    assert rows[b.employee_id]["attendance_rate"] == "N/A"
    assert rows[b.employee_id]["performance_average"] == "N/A"


def test_attendance_report_flags_overnight_rows(container, store, make_employee):
    a = make_employee("Ann")
    _attendance(store, a.employee_id, "2026-02-01", check_in="09:00", check_out="17:30")
    _attendance(store, a.employee_id, "2026-02-02", check_in="22:00", check_out="06:00")
    _attendance(store, a.employee_id, "2026-02-03", check_in="09:00", check_out="")
    _attendance(store, a.employee_id, "2026-03-01")

    report = container.analytics_service.attendance_report(start="2026-02-01", end="2026-02-28")

    assert [r["total_hours"] for r in report.rows] == ["8h 30m", None, "In Progress"]
    assert report.rows[1]["flag"]
    assert report.rows[0]["full_name"] == "Ann Johnson"
    assert report.summary["Present"] == 3


def test_attendance_csv_export(container, store, make_employee):
    a = make_employee("Ann")
    _attendance(store, a.employee_id, "2026-02-01", check_in="09:00", check_out="17:30")

    body = container.analytics_service.export_attendance_csv(start="2026-02-01", end="2026-02-28")

    lines = body.strip().splitlines()
    assert lines[0].startswith("employee_id,full_name,department,date")
    assert lines[1].endswith("8h 30m")


def test_attendance_report_flags_malformed_stored_times(container, store, make_employee):
    a = make_employee("Ann")
    _attendance(store, a.employee_id, "2026-02-01", check_in="9", check_out="17:00")
    _attendance(store, a.employee_id, "2026-02-02", check_in="09:00", check_out="17:00")

    report = container.analytics_service.attendance_report(start="2026-02-01", end="2026-02-28")
    body = container.analytics_service.export_attendance_csv(start="2026-02-01", end="2026-02-28")

    assert [r["total_hours"] for r in report.rows] == [None, "8h 0m"]
    assert report.rows[0]["flag"]
    assert report.rows[1]["flag"] is None
    assert len(body.strip().splitlines()) == 3

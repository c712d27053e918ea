from src.hr_management.hr_management.attendance.deriver import derive_all, derive_today, select_today_record
from src.hr_management.hr_management.attendance.model import AttendanceRecord
from src.hr_management.hr_management.core.enums import AttendanceStatus, SignInState

TODAY = "2026-02-02"


def _rec(rid, eid, day=TODAY, status=AttendanceStatus.PRESENT, check_in="09:00", check_out=""):
    return AttendanceRecord(
        record_id=str(rid), employee_id=str(eid), date=day, status=status, check_in=check_in, check_out=check_out
    )


def test_no_record_today_is_not_marked():
    records = [_rec(1, "1", day="2026-02-01"), _rec(2, "2")]

    today = derive_today(records, "1", TODAY)

    assert today.state == SignInState.NO_RECORD
    assert today.today_status == AttendanceStatus.NOT_MARKED
    assert today.is_signed_in is False
    assert today.sign_in_time is None


def test_open_record_means_signed_in():
    today = derive_today([_rec(1, "1", check_in="08:45")], "1", TODAY)

    assert today.is_signed_in is True
    assert today.sign_in_time == "08:45"
    assert today.today_status == AttendanceStatus.PRESENT


def test_closed_record_reports_status_but_not_signed_in():
    today = derive_today([_rec(1, "1", status=AttendanceStatus.LATE, check_out="17:00")], "1", TODAY)

    assert today.state == SignInState.SIGNED_OUT
    assert today.is_signed_in is False
    assert today.sign_in_time is None
    assert today.today_status == AttendanceStatus.LATE


def test_last_same_day_record_wins():
    records = [
        _rec(1, "1", check_in="08:00", check_out="12:00"),
        _rec(2, "2"),
        _rec(3, "1", check_in="13:00"),
    ]

    assert select_today_record(records, "1", TODAY).record_id == "3"
    assert derive_today(records, "1", TODAY).sign_in_time == "13:00"


def test_absent_record_without_times_is_treated_as_signed_in_state():
    # check_out is empty, so the toggle would close this record
    today = derive_today([_rec(1, "1", status=AttendanceStatus.ABSENT, check_in="")], "1", TODAY)

    assert today.today_status == AttendanceStatus.ABSENT
    assert today.state == SignInState.SIGNED_IN


def test_derive_all_covers_every_employee():
    result = derive_all([_rec(1, "1")], ["1", "2"], TODAY)

    assert result["1"].is_signed_in
    assert result["2"].today_status == AttendanceStatus.NOT_MARKED

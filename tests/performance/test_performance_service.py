import pytest

from src.hr_management.hr_management.core.exceptions import StoreError, ValidationError


def test_create_and_list_by_employee(container):
    container.performance_service.create(employee_id="1", quarter="Q3 2024", score="4.2", review_date="2024-09-15")
    container.performance_service.create(employee_id="2", quarter="Q3 2024", score=4.5, review_date="2024-09-20")

    reviews = container.performance_service.list_reviews("1")

    assert [r.score for r in reviews] == [4.2]
    assert len(container.performance_service.list_reviews()) == 2


@pytest.mark.parametrize(
    "kwargs",
    [
        {"employee_id": "", "quarter": "Q3 2024", "score": 4},
        {"employee_id": "1", "quarter": " ", "score": 4},
        {"employee_id": "1", "quarter": "Q3 2024", "score": "great"},
        {"employee_id": "1", "quarter": "Q3 2024", "score": 4, "review_date": "15/09/2024"},
    ],
)
def test_create_validation(container, kwargs):
    with pytest.raises(ValidationError):
        container.performance_service.create(**kwargs)


def test_update_and_delete(container):
    review = container.performance_service.create(employee_id="1", quarter="Q3 2024", score=3)

    updated = container.performance_service.update(review.review_id, {"score": "4.8", "goals": "Mentor juniors"})
    assert updated.score == 4.8
    assert updated.goals == "Mentor juniors"

    container.performance_service.delete(review.review_id)
    with pytest.raises(StoreError):
        container.performance_service.delete(review.review_id)


def test_departments(container):
    engineering = container.department_service.create("Engineering")
    container.department_service.create("Finance")

    renamed = container.department_service.rename(engineering.department_id, "Platform Engineering")

    assert renamed.name == "Platform Engineering"
    assert [d.name for d in container.department_service.list_departments("plat")] == ["Platform Engineering"]
    with pytest.raises(ValidationError):
        container.department_service.create("  ")

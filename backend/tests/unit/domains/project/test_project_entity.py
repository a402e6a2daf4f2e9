import pytest

from casebook.domains.project.domain.entities import PROJECT_OBJECT_TYPE, Project
from casebook.shared_kernel.exceptions import ValidationError


def test_project_without_name_is_invalid():
    with pytest.raises(ValidationError) as exc_info:
        Project(name="", description="anything").validate()
    assert str(exc_info.value) == "name is a mandatory parameter"
    assert exc_info.value.details == {"field": "name"}


@pytest.mark.parametrize("name", ["Checkout", " ", "x"])
def test_project_with_name_is_valid(name):
    Project(name=name).validate()


def test_description_may_be_empty():
    Project(name="Checkout", description="").validate()


def test_new_project_has_no_identity():
    project = Project(name="Checkout")
    assert project.get_identity() is None
    assert PROJECT_OBJECT_TYPE == "project"

"""
错误类型单元测试
验证错误类别、数字编码和字典编码
"""

import pytest

from volunteer_registry.errors import (
    ProfileErrorKind,
    ProfileStoreError,
    NotFoundError,
    AlreadyExistsError,
    InvalidSkillsError,
    InvalidInputError,
    InvalidNameError,
    InvalidLocationError,
    InvalidHoursError,
)


class TestErrorCodes:
    """测试错误编码"""

    @pytest.mark.parametrize("error, kind, code", [
        (NotFoundError("u1"), ProfileErrorKind.NOT_FOUND, 404),
        (AlreadyExistsError("u1"), ProfileErrorKind.ALREADY_EXISTS, 409),
        (InvalidSkillsError("empty"), ProfileErrorKind.INVALID_SKILLS, 403),
        (InvalidHoursError(), ProfileErrorKind.INVALID_HOURS, 400),
    ])
    def test_kind_and_code(self, error, kind, code):
        assert error.kind == kind
        assert error.code == code

    def test_input_errors_share_code_400(self):
        """测试姓名、地点错误沿用 400 编码"""
        for error in (InvalidNameError(), InvalidLocationError(), InvalidHoursError()):
            assert isinstance(error, InvalidInputError)
            assert error.code == 400

    def test_all_errors_are_store_errors(self):
        for error in (NotFoundError("u"), AlreadyExistsError("u"), InvalidSkillsError("x")):
            assert isinstance(error, ProfileStoreError)


class TestErrorFields:
    """测试 field 属性与字典编码"""

    def test_field_names(self):
        assert InvalidNameError().field == "name"
        assert InvalidLocationError().field == "location"
        assert InvalidHoursError().field == "hours"
        assert InvalidSkillsError("x").field == "skills"
        assert NotFoundError("u").field is None

    def test_to_dict(self):
        data = InvalidHoursError("too few").to_dict()

        assert data == {
            "kind": "invalid_hours",
            "code": 400,
            "message": "too few",
            "field": "hours",
        }

    def test_to_dict_without_field(self):
        data = NotFoundError("principal-1").to_dict()

        assert data["kind"] == "not_found"
        assert data["code"] == 404
        assert "principal-1" in data["message"]
        assert "field" not in data

    def test_str_is_message(self):
        assert str(AlreadyExistsError("u1")) == "Volunteer profile already exists for 'u1'"

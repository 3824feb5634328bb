"""Tests for ValidationService."""

import asyncio
import errno
import json
import logging
import os
from unittest.mock import patch

import pytest

from icu_validator.exceptions import (
    FileReadError,
    InvalidInputKindError,
    JsonParseError,
    UnsupportedFileTypeError,
)
from icu_validator.validation.results import (
    FileValidationResult,
    ObjectValidationResult,
    StringValidationResult,
)
from icu_validator.validation.service import ValidationService


@pytest.fixture
def service():
    return ValidationService()


def _json_file(directory, name, data):
    path = directory / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestValidateJsonFile:
    """Tests for single file validation."""

    def test_valid_file(self, service, tmp_path):
        path = _json_file(tmp_path, "en.json", {"a": "Hi {name}", "b": {"c": "Bye"}})

        result = service.validate_json_file(str(path))

        assert isinstance(result, FileValidationResult)
        assert result.file_name == str(path)
        assert result.is_valid
        assert set(result.validation_result.keys()) == {"a", "b"}

    def test_invalid_string_marks_file_invalid(self, service, tmp_path):
        path = _json_file(tmp_path, "en.json", {"a": "Hi {name}", "b": {"c": "Bye {"}})

        result = service.validate_json_file(str(path))

        assert not result.is_valid
        assert result.validation_result["b"]["c"].is_error

    def test_top_level_string(self, service, tmp_path):
        path = _json_file(tmp_path, "single.json", "Hello {name}")

        result = service.validate_json_file(str(path))

        assert result.validation_result == StringValidationResult.valid()
        assert result.is_valid

    def test_rejects_non_json_suffix(self, service, tmp_path):
        path = tmp_path / "en.yaml"
        path.write_text("a: b", encoding="utf-8")

        with pytest.raises(UnsupportedFileTypeError):
            service.validate_json_file(str(path))

    def test_missing_file_raises_read_error(self, service, tmp_path):
        with pytest.raises(FileReadError) as exc_info:
            service.validate_json_file(str(tmp_path / "missing.json"))

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_malformed_json_raises(self, service, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(JsonParseError):
            service.validate_json_file(str(path))

    def test_non_string_value_raises(self, service, tmp_path):
        path = _json_file(tmp_path, "en.json", {"count": 3})

        with pytest.raises(InvalidInputKindError):
            service.validate_json_file(str(path))

    def test_list_values_keyed_by_index(self, service, tmp_path):
        path = _json_file(tmp_path, "en.json", {"steps": ["One {n}", "Two {"]})

        result = service.validate_json_file(str(path))

        assert not result.is_valid
        assert [p for p, _ in result.validation_result.errors()] == ["steps.1"]

    def test_validated_file_logged_with_validator_name(self, service, tmp_path, caplog):
        caplog.set_level(logging.DEBUG, logger="icu_validator")
        path = _json_file(tmp_path, "en.json", {"a": "Hi"})

        service.validate_json_file(str(path))

        assert any("validator=icu-tree" in record.getMessage() for record in caplog.records)

    def test_async_matches_sync(self, service, tmp_path):
        path = _json_file(tmp_path, "en.json", {"a": "Hi {name}", "b": "Bad {"})

        sync_result = service.validate_json_file(str(path))
        async_result = asyncio.run(service.validate_json_file_async(str(path)))

        assert async_result == sync_result

    def test_async_rejects_non_json_suffix(self, service, tmp_path):
        with pytest.raises(UnsupportedFileTypeError):
            asyncio.run(service.validate_json_file_async(str(tmp_path / "en.txt")))


class TestValidateDirectory:
    """Tests for directory validation."""

    def test_one_valid_one_invalid(self, service, locales_dir):
        results = service.validate_directory(str(locales_dir))

        assert len(results) == 2
        assert [os.path.basename(r.file_name) for r in results] == ["en.json", "fr.json"]
        assert [r.is_valid for r in results] == [True, False]
        assert service.has_errors(results)

    def test_file_names_are_resolved(self, service, locales_dir):
        results = service.validate_directory(str(locales_dir))

        for result in results:
            assert os.path.isabs(result.file_name)

    def test_bad_file_does_not_abort_batch(self, service, locales_dir):
        (locales_dir / "broken.json").write_text("{", encoding="utf-8")
        _json_file(locales_dir, "numbers.json", {"n": 1})

        results = service.validate_directory(str(locales_dir))
        by_name = {os.path.basename(r.file_name): r for r in results}

        assert set(by_name) == {"broken.json", "en.json", "fr.json", "numbers.json"}
        assert by_name["en.json"].is_valid
        assert by_name["broken.json"].error
        assert by_name["broken.json"].validation_result is None
        assert not by_name["numbers.json"].is_valid
        assert "string or an object" in by_name["numbers.json"].error

    def test_empty_directory(self, service, tmp_path):
        assert service.validate_directory(str(tmp_path)) == []

    def test_missing_directory_raises(self, service, tmp_path):
        with pytest.raises(FileReadError):
            service.validate_directory(str(tmp_path / "nope"))

    def test_async_matches_sync(self, service, locales_dir):
        (locales_dir / "broken.json").write_text("[", encoding="utf-8")

        sync_results = service.validate_directory(str(locales_dir))
        async_results = asyncio.run(service.validate_directory_async(str(locales_dir)))

        assert async_results == sync_results


class TestDispatch:
    """Tests for ValidationService.validate routing."""

    def test_mapping_routes_to_object(self, service):
        result = service.validate({"greeting": "Hi {name}", "farewell": "Bye {name}"})

        assert isinstance(result, ObjectValidationResult)
        assert result.is_valid

    def test_list_routes_to_object(self, service):
        result = service.validate(["One {n}", "Two {"])

        assert isinstance(result, ObjectValidationResult)
        assert list(result.keys()) == ["0", "1"]
        assert result["1"].is_error

    def test_literal_string(self, service):
        assert service.validate("Hello {name}") == StringValidationResult.valid()

    def test_invalid_literal_string(self, service):
        result = service.validate("Hello {name")

        assert result.is_error
        assert result.detail.error_message

    def test_file_path(self, service, tmp_path):
        path = _json_file(tmp_path, "en.json", {"a": "Hi"})

        result = service.validate(str(path))

        assert isinstance(result, FileValidationResult)
        assert result.is_valid

    def test_file_path_with_wrong_suffix_raises(self, service, tmp_path):
        path = tmp_path / "readme.md"
        path.write_text("# hi", encoding="utf-8")

        with pytest.raises(UnsupportedFileTypeError):
            service.validate(str(path))

    def test_directory_path(self, service, locales_dir):
        result = service.validate(str(locales_dir))

        assert isinstance(result, list)
        assert [r.is_valid for r in result] == [True, False]

    def test_overlong_string_is_a_message(self, service):
        text = "{name} " * 2000

        assert not service.validate(text).is_error

    def test_string_with_nul_is_a_message(self, service):
        assert not service.validate("Hello\x00{name}").is_error

    def test_unexpected_stat_error_falls_back_to_message(self, service):
        denied = PermissionError(errno.EACCES, "Permission denied")
        with patch("icu_validator.validation.service.os.stat", side_effect=denied):
            result = service.validate("Hello {name}")

        assert result == StringValidationResult.valid()

    @pytest.mark.parametrize("source", [42, None, ("Hello",)])
    def test_unsupported_source_raises(self, service, source):
        with pytest.raises(InvalidInputKindError):
            service.validate(source)


class TestHasErrors:
    def test_string_results(self, service):
        assert not service.has_errors(service.validate_string("Hi"))
        assert service.has_errors(service.validate_string("Hi {"))

    def test_file_list(self, service):
        ok = FileValidationResult("a.json", True)
        bad = FileValidationResult("b.json", False)

        assert not service.has_errors([ok])
        assert service.has_errors([ok, bad])

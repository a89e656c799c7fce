"""Tests for loading the credentials file."""

import json
import logging

import pytest

from jira_version_checker.credentials import Credentials, CredentialsError, load_credentials
from version_checker_interface.client import IssueTrackerError


def _write(tmp_path, content):
    path = tmp_path / "credentials.json"
    path.write_text(content, encoding="utf-8")
    return path


def test_load_credentials_reads_user_and_password(tmp_path):
    path = _write(tmp_path, json.dumps({"user": "jdoe", "password": "s3cret"}))

    assert load_credentials(path) == Credentials("jdoe", "s3cret")


def test_load_credentials_accepts_str_path_and_ignores_unknown_keys(tmp_path):
    path = _write(tmp_path, json.dumps({"user": "jdoe", "password": "s3cret", "token": "unused"}))

    assert load_credentials(str(path)) == Credentials("jdoe", "s3cret")


def test_load_credentials_missing_keys_are_empty(tmp_path):
    path = _write(tmp_path, "{}")

    assert load_credentials(path) == Credentials("", "")


def test_load_credentials_missing_file_raises(tmp_path):
    with pytest.raises(CredentialsError) as exc_info:
        load_credentials(tmp_path / "missing.json")

    assert "Error opening credentials file" in str(exc_info.value)


@pytest.mark.parametrize("content", ["", "user=jdoe", '["jdoe", "s3cret"]', '{"user": 1, "password": "x"}'])
def test_load_credentials_bad_content_raises(tmp_path, content):
    path = _write(tmp_path, content)

    with pytest.raises(CredentialsError):
        load_credentials(path)


def test_credentials_error_is_an_issue_tracker_error():
    assert issubclass(CredentialsError, IssueTrackerError)


def test_credentials_repr_hides_password():
    assert "s3cret" not in repr(Credentials("jdoe", "s3cret"))


def test_load_credentials_undecodable_bytes_raises(tmp_path):
    path = tmp_path / "credentials.json"
    path.write_bytes(b'{"user": "\xff\xfe", "password": "x"}')

    with pytest.raises(CredentialsError) as exc_info:
        load_credentials(path)

    assert "Error parsing credentials file" in str(exc_info.value)


def test_load_credentials_reads_utf8_values(tmp_path):
    path = _write(tmp_path, json.dumps({"user": "用户", "password": "pässwörd€"}, ensure_ascii=False))

    assert load_credentials(path) == Credentials("用户", "pässwörd€")


def test_load_credentials_logs_path_but_not_user(tmp_path, caplog):
    path = _write(tmp_path, json.dumps({"user": "jdoe", "password": "s3cret"}))

    with caplog.at_level(logging.DEBUG, logger="jira_version_checker.credentials"):
        load_credentials(path)

    assert str(path) in caplog.text
    assert "jdoe" not in caplog.text
    assert "s3cret" not in caplog.text

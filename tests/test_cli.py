"""
CLI Integration Tests

Tests verify the click-based command group works end to end.
Uses click.testing.CliRunner for isolated CLI testing.
"""

import json
import logging

import pytest
from click.testing import CliRunner

from oneclick_unsubscribe.cli.main import cli
from oneclick_unsubscribe.config import Config

BASE = 'https://example.com/unsubscribe'


@pytest.fixture
def invoke(tmp_path, monkeypatch):
    """Invoke the CLI without picking up a real .env file or configured base URI."""
    monkeypatch.setattr(Config, 'BASE_URI', None)
    monkeypatch.setattr(Config, 'LOG_LEVEL', 'WARNING')
    monkeypatch.setattr(Config, 'LOG_FORMAT', 'standard')
    runner = CliRunner()

    def _invoke(args, **kwargs):
        return runner.invoke(cli, ['--env-file', str(tmp_path / 'missing.env')] + args, **kwargs)

    yield _invoke

    oneclick_logger = logging.getLogger('oneclick')
    oneclick_logger.handlers.clear()
    oneclick_logger.setLevel(logging.NOTSET)


class TestCreateCommand:
    """Test 'create' command."""

    def test_create_prints_serialized_link(self, invoke):
        result = invoke(['create', '--base-uri', BASE, 'abc123xyz'])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            'uri': 'https://example.com/unsubscribe/abc123xyz',
            'token': 'abc123xyz',
        }

    def test_create_rejects_http(self, invoke):
        result = invoke(['create', '--base-uri', 'http://example.com/unsubscribe', 'abc123'])

        assert result.exit_code == 2
        assert 'requires HTTPS' in result.output

    def test_create_rejects_empty_token(self, invoke):
        result = invoke(['create', '--base-uri', BASE, ''])

        assert result.exit_code == 2
        assert 'Invalid opaque token' in result.output

    def test_create_rejects_invalid_uri(self, invoke):
        result = invoke(['create', '--base-uri', BASE, 'a b'])

        assert result.exit_code == 2
        assert 'Invalid URI' in result.output

    def test_create_rejects_unparseable_base(self, invoke):
        result = invoke(['create', '--base-uri', 'not a uri', 'abc123'])

        assert result.exit_code == 2
        assert 'Error' in result.output

    def test_create_uses_configured_base(self, invoke, monkeypatch):
        monkeypatch.setattr(Config, 'BASE_URI', 'https://lists.example.org/u/')

        result = invoke(['create', 'tok'])

        assert result.exit_code == 0
        assert json.loads(result.output)['uri'] == 'https://lists.example.org/u/tok'

    def test_create_without_base_uri(self, invoke):
        result = invoke(['create', 'tok'])

        assert result.exit_code == 2
        assert 'No base URI' in result.output


class TestHeadersCommand:
    """Test 'headers' command."""

    def test_headers_text(self, invoke):
        result = invoke(['headers', '--base-uri', BASE, 'abc123xyz'])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert sorted(lines) == [
            'List-Unsubscribe-Post: List-Unsubscribe=One-Click',
            'List-Unsubscribe: <https://example.com/unsubscribe/abc123xyz>',
        ]

    def test_headers_json(self, invoke):
        result = invoke(['headers', '--base-uri', BASE + '/', 'abc123', '--json'])

        assert result.exit_code == 0
        assert json.loads(result.output) == {
            'List-Unsubscribe': '<https://example.com/unsubscribe/abc123>',
            'List-Unsubscribe-Post': 'List-Unsubscribe=One-Click',
        }


class TestRequestCommand:
    """Test 'request' command."""

    def test_request_shows_post(self, invoke):
        result = invoke(['request', '--base-uri', BASE, 'abc123'])

        assert result.exit_code == 0
        assert result.output.startswith('POST https://example.com/unsubscribe/abc123\n')
        assert 'Content-Type: application/x-www-form-urlencoded' in result.output
        assert result.output.rstrip().endswith('List-Unsubscribe=One-Click')

    def test_request_uses_configured_user_agent(self, invoke, monkeypatch):
        monkeypatch.setattr(Config, 'USER_AGENT', 'ListClient/2.0')

        result = invoke(['request', '--base-uri', BASE, 'abc123'])

        assert 'User-Agent: ListClient/2.0' in result.output


class TestValidateCommand:
    """Test 'validate' command."""

    @pytest.fixture
    def link_file(self, invoke, tmp_path):
        result = invoke(['create', '--base-uri', BASE, 'correct-token'])
        path = tmp_path / 'link.json'
        path.write_text(result.output)
        return path

    def test_valid_token(self, invoke, link_file):
        result = invoke(['validate', str(link_file), 'correct-token'])

        assert result.exit_code == 0
        assert result.output.strip() == 'valid'

    def test_invalid_token(self, invoke, link_file):
        result = invoke(['validate', str(link_file), 'wrong-token'])

        assert result.exit_code == 1
        assert 'invalid' in result.output
        assert 'wrong-token' not in result.output

    def test_link_from_stdin(self, invoke, link_file):
        result = invoke(['validate', '-', 'correct-token'], input=link_file.read_text())

        assert result.exit_code == 0
        assert 'valid' in result.output

    def test_unreadable_link(self, invoke, tmp_path):
        path = tmp_path / 'broken.json'
        path.write_text('{"uri": "https://example.com/u/tok"}')

        result = invoke(['validate', str(path), 'tok'])

        assert result.exit_code == 2
        assert 'Could not read link' in result.output

    def test_tampered_link(self, invoke, tmp_path):
        path = tmp_path / 'tampered.json'
        path.write_text(json.dumps({'uri': 'http://example.com/u/tok', 'token': 'tok'}))

        result = invoke(['validate', str(path), 'tok'])

        assert result.exit_code == 2
        assert 'requires HTTPS' in result.output


    def test_non_text_token(self, invoke, tmp_path):
        path = tmp_path / "numeric.json"
        path.write_text(json.dumps({"uri": "https://example.com/u/123", "token": 123}))

        result = invoke(["validate", str(path), "123"])

        assert result.exit_code == 2
        assert "Invalid opaque token" in result.output

    def test_uri_not_issued_for_token(self, invoke, tmp_path):
        path = tmp_path / "mismatched.json"
        path.write_text(json.dumps({"uri": "https://example.com/u/other", "token": "abc"}))

        result = invoke(["validate", str(path), "abc"])

        assert result.exit_code == 2
        assert "Invalid URI" in result.output


class TestVersion:

    def test_version(self, invoke):
        result = invoke(['--version'])

        assert result.exit_code == 0
        assert '1.0.0' in result.output

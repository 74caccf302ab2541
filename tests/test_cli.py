"""Tests for the atsmsg command line."""
import json

import pytest

from atsmsg import cli
from atsmsg.config import Config


@pytest.fixture
def message_file(tmp_path):
    def _write(text):
        path = tmp_path / "message.txt"
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write


class TestMain:
    """Test cases for cli.main exit codes and output."""

    def test_fpl_ready(self, message_file, oma123_fpl, capsys):
        assert cli.main(['fpl', message_file(oma123_fpl)]) == cli.EXIT_READY
        assert "READY for filing" in capsys.readouterr().out

    def test_fpl_with_errors(self, message_file, aby789_fpl):
        raw = aby789_fpl.replace("PBN/A1B2 ", "")

        assert cli.main(['fpl', message_file(raw)]) == cli.EXIT_ERRORS

    def test_fpl_json(self, message_file, oma123_fpl, capsys):
        assert cli.main(['--json', 'fpl', message_file(oma123_fpl)]) == cli.EXIT_READY

        data = json.loads(capsys.readouterr().out)
        assert data['summary']['errors'] == 0
        assert data['field18']['DOF'] == '260215'

    def test_fpl_unparseable(self, message_file):
        assert cli.main(['fpl', message_file("not a flight plan")]) == cli.EXIT_BAD_INPUT

    def test_missing_file(self, tmp_path):
        assert cli.main(['fpl', str(tmp_path / "missing.txt")]) == cli.EXIT_BAD_INPUT

    def test_field18(self, capsys):
        assert cli.main(['field18', 'PBN/A1B2', 'DOF/260215', 'REG/A4OEE']) == cli.EXIT_READY
        assert "PBN capabilities" in capsys.readouterr().out

    def test_field18_with_errors(self):
        assert cli.main(['field18', 'DOF/261399']) == cli.EXIT_ERRORS

    def test_notam(self, message_file, runway_closure_notam, capsys):
        assert cli.main(['notam', message_file(runway_closure_notam)]) == cli.EXIT_READY
        assert "A1234/26 | OOSA" in capsys.readouterr().out

    def test_notam_garbage(self, message_file):
        assert cli.main(['notam', message_file("")]) == cli.EXIT_BAD_INPUT

    def test_fetch_without_key(self, monkeypatch):
        monkeypatch.setattr(Config, 'AVWX_API_KEY', '')

        assert cli.main(['fetch', 'OOSA']) == cli.EXIT_BAD_INPUT

    def test_fetch_needs_target(self):
        assert cli.main(['fetch']) == cli.EXIT_BAD_INPUT

    def test_fetch_decodes(self, monkeypatch, runway_closure_notam, capsys):
        class FakeClient:
            def fetch_notams_for_airport(self, airport_code):
                return [runway_closure_notam]

        monkeypatch.setattr(cli, 'get_notam_client', FakeClient)

        assert cli.main(['--json', 'fetch', 'OOSA', '--decode']) == cli.EXIT_READY
        data = json.loads(capsys.readouterr().out)
        assert data[0]['id'] == 'A1234/26'

    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            cli.main([])

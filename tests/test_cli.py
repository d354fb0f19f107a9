"""Tests for the Typer CLI."""
import json

import pytest
from typer.testing import CliRunner

from zapchat.cli.app import _mask, app

runner = CliRunner()


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "storage.json"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ZAPCHAT_STORE", "ZAPCHAT_STORE_PATH", "ZAPCHAT_SERIALIZE_REPLIES", "ZAPCHAT_SPEED"):
        monkeypatch.delenv(name, raising=False)


class TestKeyCommands:
    """Tests for `zapchat key`."""

    def test_set_show_clear(self, store_path):
        result = runner.invoke(app, ["key", "set", "sk-1234567890", "--store-path", str(store_path)])
        assert result.exit_code == 0
        assert json.loads(store_path.read_text()) == {"cohere_api_key": "sk-1234567890"}

        result = runner.invoke(app, ["key", "show", "--store-path", str(store_path)])
        assert result.exit_code == 0
        assert "sk-1…7890" in result.output
        assert "sk-1234567890" not in result.output

        result = runner.invoke(app, ["key", "clear", "--store-path", str(store_path)])
        assert result.exit_code == 0
        assert json.loads(store_path.read_text()) == {}

        result = runner.invoke(app, ["key", "show", "--store-path", str(store_path)])
        assert "Demo Mode" in result.output

    def test_set_trims(self, store_path):
        runner.invoke(app, ["key", "set", "  abc  ", "--store-path", str(store_path)])
        assert json.loads(store_path.read_text()) == {"cohere_api_key": "abc"}

    def test_set_blank_fails(self, store_path):
        result = runner.invoke(app, ["key", "set", "   ", "--store-path", str(store_path)])
        assert result.exit_code == 1
        assert not store_path.exists()

    def test_set_on_broken_store_fails(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        result = runner.invoke(app, ["key", "set", "abc", "--store-path", str(blocker / "s.json")])
        assert result.exit_code == 1
        assert "Key storage unavailable" in result.output

    def test_unknown_backend(self):
        result = runner.invoke(app, ["key", "show", "--store", "redis"])
        assert result.exit_code == 1
        assert "Unsupported store backend" in result.output

    def test_env_selects_store(self, store_path, monkeypatch):
        monkeypatch.setenv("ZAPCHAT_STORE_PATH", str(store_path))
        runner.invoke(app, ["key", "set", "from-env"])
        assert json.loads(store_path.read_text()) == {"cohere_api_key": "from-env"}

    @pytest.mark.parametrize("value,expected", [("abc", "***"), ("12345678", "********"), ("123456789", "1234…6789")])
    def test_mask(self, value, expected):
        assert _mask(value) == expected


class TestAsk:
    """Tests for `zapchat ask`."""

    def test_keyword_reply(self):
        result = runner.invoke(app, ["ask", "who are you", "--store", "memory"])
        assert result.exit_code == 0
        assert "I'm Zap" in result.output
        assert "You ·" in result.output

    def test_scripts_offer(self):
        result = runner.invoke(app, ["ask", "any scripts?", "--store", "memory"])
        assert result.exit_code == 0
        assert "All_Scripts.zip" in result.output
        assert "download" in result.output
        assert result.output.index("complete scripts") < result.output.index("All_Scripts.zip")

    def test_seeded_fallback_is_repeatable(self):
        first = runner.invoke(app, ["ask", "hello", "--seed", "3", "--store", "memory"])
        second = runner.invoke(app, ["ask", "hello", "--seed", "3", "--store", "memory"])
        strip = lambda out: [line for line in out.splitlines() if "·" not in line]
        assert strip(first.output) == strip(second.output)

    def test_blank_message(self):
        result = runner.invoke(app, ["ask", "   ", "--store", "memory"])
        assert result.exit_code == 1

    def test_discord_prints_link(self):
        result = runner.invoke(app, ["ask", "/discord", "--store", "memory"])
        assert result.exit_code == 0
        assert "discord.gg" in result.output


class TestChat:
    """Tests for line-mode `zapchat chat`."""

    def test_conversation(self):
        result = runner.invoke(app, ["chat", "--store", "memory", "--speed", "0"], input="help\nq\n")
        assert result.exit_code == 0
        assert "Demo Mode" in result.output
        assert "I'm here to help" in result.output
        assert "Goodbye" in result.output

    def test_discord_decline(self):
        result = runner.invoke(
            app, ["chat", "--store", "memory", "--speed", "0"], input="/discord\nn\nquit\n"
        )
        assert result.exit_code == 0
        assert "No problem!" in result.output

    def test_download_latest_file(self):
        result = runner.invoke(
            app, ["chat", "--store", "memory", "--speed", "0"], input=":download\nscript\n:download\nexit\n"
        )
        assert result.exit_code == 0
        assert "No file has been offered yet" in result.output
        assert "Downloading All_Scripts.zip" in result.output

    def test_end_of_input_exits(self):
        result = runner.invoke(app, ["chat", "--store", "memory", "--speed", "0"], input="")
        assert result.exit_code == 0
        assert "Goodbye" in result.output


def test_commands_table():
    result = runner.invoke(app, ["commands"])
    assert result.exit_code == 0
    for prefix in ("/clone", "/figma", "/page", "/improve", "/discord"):
        assert prefix in result.output


def test_no_args_shows_help():
    result = runner.invoke(app, [])
    assert "tui" in result.output
    assert "chat" in result.output

from __future__ import annotations

import json
from dataclasses import dataclass

import pytest

from tambola import __version__, cli
from tambola.config import BaseConfig
from tambola.services.analysis_service import validate_ticket
from tambola.services.ticket_service import TicketService


def test_single_ticket_table(capsys):
    assert cli.main(["ticket"]) == 0

    lines = capsys.readouterr().out.strip("\n").split("\n")
    assert lines[0].startswith("┌")
    assert lines[-1].startswith("└")
    assert len(lines) == 7


def test_tickets_as_json(capsys):
    assert cli.main(["ticket", "-c", "3", "-f", "JSON", "--seed", "1"]) == 0

    tickets = json.loads(capsys.readouterr().out)
    assert len(tickets) == 3
    for ticket in tickets:
        assert validate_ticket(ticket) == (True, "ok")


def test_pretty_json_single_ticket(capsys):
    assert cli.main(["tickets", "--format", "json", "--pretty"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("[\n  [\n")
    assert len(json.loads(out)) == 3


def test_tickets_as_csv(capsys):
    assert cli.main(["ticket", "-c", "2", "-f", "csv"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Ticket 1\n")
    assert "\n\nTicket 2\n" in out


def test_seed_makes_output_reproducible(capsys):
    cli.main(["ticket", "-f", "json", "--seed", "99"])
    first = capsys.readouterr().out
    cli.main(["ticket", "-f", "json", "--seed", "99"])
    assert capsys.readouterr().out == first


def test_seed_from_config(monkeypatch, capsys):
    @dataclass(frozen=True)
    class _Seeded(BaseConfig):
        RANDOM_SEED: int | None = 11

    monkeypatch.setattr(cli, "get_config", lambda: _Seeded())

    cli.main(["sequence", "-f", "json"])
    first = capsys.readouterr().out
    cli.main(["sequence", "-f", "json"])
    assert capsys.readouterr().out == first


def test_sequence_default_array(capsys):
    assert cli.main(["sequence"]) == 0

    sequence = json.loads(capsys.readouterr().out)
    assert sorted(sequence) == list(range(1, 91))
    assert sequence != sorted(sequence)


def test_sequences_as_csv(capsys):
    assert cli.main(["sequences", "-c", "2", "-f", "csv"]) == 0

    lines = capsys.readouterr().out.strip().split("\n")
    assert len(lines) == 2
    assert lines[0].startswith("Sequence 1,")
    assert lines[1].startswith("Sequence 2,")
    assert len(lines[1].split(",")) == 91


def test_output_file(tmp_path, capsys):
    target = tmp_path / "draw.csv"

    assert cli.main(["sequence", "-f", "csv", "-o", str(target)]) == 0

    assert capsys.readouterr().out.strip() == f"Output saved to: {target}"
    values = [int(n) for n in target.read_text(encoding="utf-8").strip().split(",")]
    assert sorted(values) == list(range(1, 91))


def test_output_file_failure(tmp_path, capsys):
    target = tmp_path / "missing" / "ticket.txt"

    assert cli.main(["ticket", "-o", str(target)]) == 1

    err = capsys.readouterr().err
    assert "Error: Failed to save file" in err
    assert 'Run "tambola help"' in err


@pytest.mark.parametrize(
    "argv, message",
    [
        (["ticket", "-c", "0"], "Count must be between 1 and 100"),
        (["ticket", "-c", "101"], "Count must be between 1 and 100"),
        (["sequence", "-c", "lots"], "Count must be an integer"),
        (["ticket", "-f", "xml"], "Unsupported format: xml. Supported formats: table, json, csv"),
        (["sequence", "-f", "table"], "Unsupported format: table. Supported formats: array, json, csv"),
        (["ticket", "--seed", "abc"], "Seed must be an integer"),
        (["ticket", "-c"], "expected one argument"),
        (["ticket", "--colour"], "unrecognized arguments"),
        (["shuffle"], "invalid choice"),
    ],
)
def test_invalid_input_exits_with_1(capsys, argv, message):
    assert cli.main(argv) == 1

    err = capsys.readouterr().err
    assert err.startswith("Error: ")
    assert message in err


def test_retry_ceiling_from_config(monkeypatch, capsys):
    @dataclass(frozen=True)
    class _NoRetries(BaseConfig):
        TICKET_MAX_RETRIES: int = 0

    monkeypatch.setattr(cli, "get_config", lambda: _NoRetries())

    assert cli.main(["ticket"]) == 1
    assert "Failed to assemble a ticket within retry limit (0)" in capsys.readouterr().err


def test_unexpected_error(monkeypatch, capsys):
    def _boom(self, count=1):
        raise RuntimeError("boom")

    monkeypatch.setattr(TicketService, "generate_many", _boom)

    assert cli.main(["ticket"]) == 1
    assert "Error: Internal error: boom" in capsys.readouterr().err


@pytest.mark.parametrize("argv", [[], ["help"]])
def test_help(capsys, argv):
    assert cli.main(argv) == 0

    out = capsys.readouterr().out
    assert "usage: tambola" in out
    assert "tambola sequence -f csv -o draw.csv" in out


def test_dash_h(capsys):
    assert cli.main(["-h"]) == 0
    assert "usage: tambola" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [["version"], ["--version"], ["-v"]])
def test_version(capsys, argv):
    assert cli.main(argv) == 0
    assert capsys.readouterr().out.strip() == f"Tambola CLI v{__version__}"


def test_demo(capsys):
    assert cli.main(["demo", "--seed", "3"]) == 0

    out = capsys.readouterr().out
    assert "Generated Tambola Ticket:" in out
    assert "Ticket valid: Yes" in out
    assert "Ticket Statistics:" in out
    assert "- Contains all numbers 1-90: Yes" in out
    assert "Ticket 3:" in out


@pytest.fixture
def dotenv_dir(tmp_path, monkeypatch):
    """Run from an empty directory and undo whatever a .env file sets."""

    for name in ("TAMBOLA_TICKET_MAX_RETRIES", "TAMBOLA_SEED"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_dotenv_retry_ceiling(dotenv_dir, capsys):
    (dotenv_dir / ".env").write_text("TAMBOLA_TICKET_MAX_RETRIES=0\n", encoding="utf-8")

    assert cli.main(["ticket"]) == 1
    assert "retry limit (0)" in capsys.readouterr().err


def test_dotenv_seed(dotenv_dir, capsys):
    (dotenv_dir / ".env").write_text("TAMBOLA_SEED=42\n", encoding="utf-8")

    cli.main(["sequence", "-f", "json"])
    first = capsys.readouterr().out
    cli.main(["sequence", "-f", "json"])
    assert capsys.readouterr().out == first

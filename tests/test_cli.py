import io

import pytest

from wifisim.cli import main


def _feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_zero_users_exits_with_error(monkeypatch, capsys):
    _feed(monkeypatch, "0\n")
    assert main([]) == 1
    assert "Number of users must be greater than 0" in capsys.readouterr().err


def test_unreadable_user_count_exits_with_error(monkeypatch, capsys):
    _feed(monkeypatch, "abc\n")
    assert main([]) == 1
    assert "Number of users must be greater than 0" in capsys.readouterr().err


def test_exit_choice(monkeypatch, capsys):
    _feed(monkeypatch, "2\n4\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Enter the number of users: " in out
    assert "Exiting program. Goodbye!" in out


def test_invalid_choice_reported_and_menu_repeated(monkeypatch, capsys):
    _feed(monkeypatch, "2\n9\nx\n4\n")
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.err.count("Invalid choice! Please select a valid option.") == 2
    assert captured.out.count("Enter your choice (1-4): ") == 3


def test_end_of_input_stops_loop(monkeypatch, capsys):
    _feed(monkeypatch, "2\n")
    assert main([]) == 0
    assert "Goodbye" not in capsys.readouterr().out


def test_wifi6_choice_runs_simulation(monkeypatch, capsys):
    _feed(monkeypatch, "2\n3\n4\n")
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "=== WiFi 6 OFDMA Simulation ===" in out
    assert "NETWORK TOTALS:" in out
    assert out.index("NETWORK TOTALS:") < out.index("Exiting program. Goodbye!")


def test_users_option_skips_prompt(monkeypatch, capsys):
    _feed(monkeypatch, "4\n")
    assert main(["--users", "2"]) == 0
    out = capsys.readouterr().out
    assert "Enter the number of users: " not in out
    assert "Exiting program. Goodbye!" in out


def test_users_option_rejects_zero(monkeypatch, capsys):
    _feed(monkeypatch, "4\n")
    assert main(["--users", "0"]) == 1


def test_wifi4_choice_writes_results(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    _feed(monkeypatch, "1\n1\n4\n")
    assert main([]) == 0
    lines = (tmp_path / "wifi4_results.csv").read_text().splitlines()
    assert lines[0] == "UserID,AvgLatency(ms),Throughput(Mbps),Attempts"
    assert len(lines) == 2
    assert lines[1].startswith("1,")
    assert "Results saved to wifi4_results.csv" in capsys.readouterr().out


def test_bad_option_value_rejected():
    with pytest.raises(SystemExit):
        main(["--users", "many"])
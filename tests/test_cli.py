import random

import pytest

import rsa_sim_cli


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("BITS", "MESSAGE", "EXPONENT", "ROUNDS", "MAX_ATTEMPTS", "LOG_LEVEL"):
        monkeypatch.delenv(f"RSA_SIM_{name}", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


def test_roundtrip_prints_key_material_and_result(capsys):
    code = rsa_sim_cli.main(["--run", "roundtrip", "--plain", "--bits", "64", "--message", "Ola!"])
    out = capsys.readouterr().out

    assert code == 0
    for label in ("Prime p", "Prime q", "Modulus n", "Phi(n)", "Public exponent e", "Private exponent d"):
        assert label in out
    assert "Plaintext blocks: [79, 108, 97, 33]" in out
    assert "Recovered blocks: [79, 108, 97, 33]" in out
    assert "Recovered message: 'Ola!'" in out
    assert "Round-trip OK: True" in out


def test_roundtrip_rejects_tiny_modulus(capsys):
    code = rsa_sim_cli.main(["--run", "roundtrip", "--plain", "--bits", "8"])
    out = capsys.readouterr().out
    assert code == 1
    assert "InvalidInput" in out


def test_check_reports_carmichael_number(capsys):
    code = rsa_sim_cli.main(["--run", "check", "--plain", "--number", "561"])
    assert code == 0
    assert "Not prime" in capsys.readouterr().out


def test_check_reports_prime(capsys):
    code = rsa_sim_cli.main(["--run", "check", "--plain", "--number", "7919"])
    assert code == 0
    assert "Probably prime" in capsys.readouterr().out


def test_check_requires_number(capsys):
    assert rsa_sim_cli.main(["--run", "check", "--plain"]) == 2


def test_prime_task(capsys):
    code = rsa_sim_cli.main(["--run", "prime", "--plain", "--bits", "48"])
    out = capsys.readouterr().out
    assert code == 0
    assert "Prime (48 bits)" in out


def test_environment_supplies_defaults(monkeypatch, capsys):
    monkeypatch.setenv("RSA_SIM_BITS", "32")
    monkeypatch.setenv("RSA_SIM_MESSAGE", "env!")
    assert rsa_sim_cli.main(["--run", "roundtrip", "--plain"]) == 0
    assert "Recovered message: 'env!'" in capsys.readouterr().out


def test_bad_environment_value(monkeypatch, capsys):
    monkeypatch.setenv("RSA_SIM_BITS", "lots")
    assert rsa_sim_cli.main(["--run", "roundtrip", "--plain"]) == 2
    assert "RSA_SIM_BITS" in capsys.readouterr().err


def test_interactive_menu_exit(monkeypatch, capsys):
    answers = iter(["3", "97", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert rsa_sim_cli.main(["--plain"]) == 0
    out = capsys.readouterr().out
    assert "Probably prime" in out
    assert "Goodbye!" in out


def test_roundtrip_shows_candidates_tried(capsys):
    assert rsa_sim_cli.main(["--run", "roundtrip", "--plain", "--bits", "32"]) == 0
    out = capsys.readouterr().out
    assert "Candidates tried for p:" in out
    assert "Candidates tried for q:" in out


def test_prime_task_defaults_to_half_the_modulus(monkeypatch, capsys):
    monkeypatch.setenv("RSA_SIM_BITS", "64")
    assert rsa_sim_cli.main(["--run", "prime", "--plain"]) == 0
    assert "Prime (32 bits)" in capsys.readouterr().out


def test_menu_prime_uses_same_default(monkeypatch, capsys):
    monkeypatch.setenv("RSA_SIM_BITS", "64")
    answers = iter(["2", "", "0"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
    assert rsa_sim_cli.main(["--plain"]) == 0
    assert "Prime (32 bits)" in capsys.readouterr().out


def test_unknown_log_level_rejected(capsys):
    assert rsa_sim_cli.main(["--run", "check", "--plain", "--number", "7", "--log-level", "LOUD"]) == 2
    assert "Unknown log level: 'LOUD'" in capsys.readouterr().err

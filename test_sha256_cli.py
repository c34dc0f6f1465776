import hashlib
import os

import pytest
import yaml

import padding
import sha256_cli


ABC_DIGEST = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


def test_message_prints_digest(capsys):
    assert sha256_cli.main(["-m", "abc"]) == 0
    assert capsys.readouterr().out == ABC_DIGEST + "\n"


def test_empty_message(capsys):
    assert sha256_cli.main(["--message", ""]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_file_is_hashed_as_raw_bytes(tmp_path, capsys):
    path = tmp_path / "input.bin"
    path.write_bytes(b"abc")
    assert sha256_cli.main(["-f", str(path)]) == 0
    assert capsys.readouterr().out == ABC_DIGEST + "\n"


def test_missing_file_reports_error(tmp_path, capsys):
    assert sha256_cli.main(["-f", str(tmp_path / "missing.bin")]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("ERROR:")


def test_trace_outputs_yaml(capsys):
    assert sha256_cli.main(["-m", "a" * 60, "--trace"]) == 0
    doc = yaml.safe_load(capsys.readouterr().out)

    assert doc["message_length_bytes"] == 60
    assert doc["block_count"] == 2
    assert len(doc["blocks"]) == 2
    assert [b["block_index"] for b in doc["blocks"]] == [0, 1]
    assert all(len(b["state"]) == 8 for b in doc["blocks"])
    assert "".join(doc["blocks"][-1]["state"]) == doc["digest_hex"]


def test_source_is_required():
    with pytest.raises(SystemExit) as excinfo:
        sha256_cli.main([])
    assert excinfo.value.code == 2


def test_message_and_file_are_exclusive(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        sha256_cli.main(["-m", "abc", "-f", str(tmp_path / "x")])
    assert excinfo.value.code == 2


def test_too_large_reports_error(monkeypatch, capsys):
    monkeypatch.setattr(padding, "MAX_MESSAGE_BYTES", 2)
    assert sha256_cli.main(["-m", "abc"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("ERROR: Message of 3 bytes exceeds")


def test_undecodable_argv_bytes_are_hashed_raw(capsys):
    assert sha256_cli.main(["-m", os.fsdecode(b"\xff")]) == 0
    assert capsys.readouterr().out == hashlib.sha256(b"\xff").hexdigest() + "\n"

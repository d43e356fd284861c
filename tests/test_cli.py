import base64
import io
import json
import logging

import pytest

from ext_helpers_cli import hash_secret as hash_cli
from ext_helpers_cli import mask_json as mask_cli
from ext_helpers_lib.cryptography import derive_key


@pytest.fixture(autouse=True)
def _reset_cli_logger():
    yield
    # prepare_logger binds a handler to the stream captured for this test
    cli_logger = logging.getLogger("ext_helpers_lib")
    cli_logger.handlers.clear()
    cli_logger.setLevel(logging.NOTSET)


def test_mask_cli_masks_file(tmp_path):
    source = tmp_path / "input.json"
    target = tmp_path / "output.json"
    source.write_text(
        json.dumps({"user": "jan", "password": "x", "items": [{"token": "t"}]}),
        encoding="utf-8",
    )

    code = mask_cli.main(
        [str(source), "-o", str(target), "-p", "password", "-p", "items[*].token"]
    )

    assert code == 0
    assert json.loads(target.read_text(encoding="utf-8")) == {
        "user": "jan",
        "password": "",
        "items": [{"token": ""}],
    }


def test_mask_cli_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"age": 32}'))

    # argparse binds the STDIN default when the parser is built
    assert mask_cli.main(["-p", "age"]) == 0
    assert json.loads(capsys.readouterr().out) == {"age": 0}


def test_mask_cli_rejects_invalid_json(tmp_path):
    source = tmp_path / "input.json"
    source.write_text("{oops", encoding="utf-8")

    assert mask_cli.main([str(source), "-p", "a"]) == 1


def test_mask_cli_rejects_malformed_path(tmp_path):
    source = tmp_path / "input.json"
    source.write_text("{}", encoding="utf-8")

    assert mask_cli.main([str(source), "-p", "a..b"]) == 1


def test_mask_cli_requires_path():
    with pytest.raises(SystemExit):
        mask_cli.main([])


def test_hash_cli_with_salt_is_deterministic(capsys):
    salt = b"0123456789abcdef"
    salt_b64 = base64.b64encode(salt).decode("ascii")

    assert hash_cli.main(["secret", "--salt", salt_b64]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == [f"digest: {derive_key('secret', salt)}", f"salt: {salt_b64}"]


def test_hash_cli_generates_salt(capsys):
    assert hash_cli.main(["secret", "--algorithm", "SHA512"]) == 0

    out = dict(line.split(": ", 1) for line in capsys.readouterr().out.splitlines())
    salt = base64.b64decode(out["salt"])
    assert len(salt) == 32
    assert out["digest"] == derive_key("secret", salt, algorithm="SHA512")


def test_hash_cli_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("secret\n"))
    salt_b64 = base64.b64encode(b"salt-salt").decode("ascii")

    assert hash_cli.main(["--salt", salt_b64]) == 0
    assert f"digest: {derive_key('secret', b'salt-salt')}" in capsys.readouterr().out


def test_hash_cli_rejects_weak_iterations():
    assert hash_cli.main(["secret", "--iterations", "10"]) == 1


def test_hash_cli_rejects_invalid_salt():
    assert hash_cli.main(["secret", "--salt", "***"]) == 1

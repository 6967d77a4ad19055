import yaml

from engine import H0, digest
from trace_dump import main, trace_to_dict, write_trace


def test_trace_to_dict_single_block():
    result = trace_to_dict(b"abc")

    assert result["message_hex"] == "616263"
    assert result["message_length_bytes"] == 3
    assert result["block_count"] == 1
    assert result["digest_hex"] == digest(b"abc")

    (block,) = result["blocks"]
    assert block["block_index"] == 0
    assert block["words"][0] == "61626380"
    assert block["words"][15] == "00000018"
    assert block["schedule"][17] == "000f0000"
    assert block["state_in"] == [f"{w:08x}" for w in H0]
    assert "".join(block["state_out"]) == digest(b"abc")


def test_write_trace_round_trips_through_yaml(tmp_path):
    path = tmp_path / "nested" / "trace.yaml"
    written = write_trace(str(path), b"x" * 60)

    with open(path) as f:
        loaded = yaml.safe_load(f)

    assert loaded == written
    assert loaded["block_count"] == 2
    assert loaded["blocks"][1]["state_in"] == loaded["blocks"][0]["state_out"]


def test_main_writes_named_trace(tmp_path, capsys):
    assert main(["hello", "--output-dir", str(tmp_path), "--name", "hello"]) == 0
    out = capsys.readouterr().out
    assert f"Digest: {digest(b'hello')}" in out
    assert (tmp_path / "hello.yaml").exists()


def test_main_requires_exactly_one_input(tmp_path, capsys):
    assert main(["--output-dir", str(tmp_path)]) == 1
    assert "exactly one" in capsys.readouterr().err


def test_main_reports_unwritable_output_dir(tmp_path, capsys):
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"")

    assert main(["abc", "--output-dir", str(blocker)]) == 1
    captured = capsys.readouterr()
    assert "Error writing trace" in captured.err
    assert "Digest:" not in captured.out

import io
import json

from tagcloud.cli import main

TEXT = "The cat sat on the mat. A cat ran."


def write_inputs(tmp_path):
    text = tmp_path / "story.txt"
    text.write_text(TEXT)
    ignore = tmp_path / "ignore.txt"
    ignore.write_text("the\na\n")
    return text, ignore


def test_json_output(tmp_path, capsys):
    text, ignore = write_inputs(tmp_path)
    code = main(["3", str(text), "--ignore-file", str(ignore), "--group-size", "1", "--format", "json"])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert [(w["word"], w["size_group"]) for w in payload["words"]] == [("cat", 2), ("mat", 1), ("on", 1)]


def test_html_output_to_file_with_default_stop_words(tmp_path):
    text, _ = write_inputs(tmp_path)
    out = tmp_path / "cloud.html"
    assert main(["10", str(text), "--group-size", "1", "--output", str(out)]) == 0
    html = out.read_text()
    assert '<span class="size-2">cat</span>' in html
    # "on" is in the bundled ignore list
    assert ">on<" not in html
    assert ">the<" not in html


def test_raw_text_argument_and_config_file(tmp_path, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("cloud:\n  group_size: 1\nrender:\n  format: json\n")
    assert main(["2", "zebra zebra yak", "--config", str(cfg)]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert [w["word"] for w in payload["words"]] == ["yak", "zebra"]


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("kiwi kiwi mango"))
    assert main(["1", "--stdin", "--group-size", "1", "--format", "json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["words"] == [{"word": "kiwi", "size_group": 2, "font_size": 14}]


def test_derive_stopwords_flag(capsys):
    assert main(["5", "aa aa aa bb bb cc", "--derive-stopwords", "1", "--group-size", "1", "--format", "json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert [w["word"] for w in payload["words"]] == ["bb", "cc"]


def test_invalid_group_size_exits_with_2(capsys):
    assert main(["3", "some words", "--group-size", "0"]) == 2
    assert "group_size" in capsys.readouterr().err


def test_missing_ignore_file_exits_with_1(tmp_path, capsys):
    code = main(["3", "some words", "--ignore-file", str(tmp_path / "missing.txt")])
    assert code == 1
    assert "missing.txt" in capsys.readouterr().err


def test_unknown_format_in_config_exits_with_2(tmp_path, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("render:\n  format: svg\n")
    assert main(["3", "some words", "--config", str(cfg)]) == 2
    assert "svg" in capsys.readouterr().err


def test_log_level_flag_enables_progress_messages(capsys):
    assert main(["3", "cat cat mat", "--group-size", "1", "--log-level", "info"]) == 0
    captured = capsys.readouterr()
    assert '<span class="size-2">cat</span>' in captured.out
    assert "INFO [tagcloud.cli] kept 2 of 2 distinct words" in captured.err


def test_bad_log_level_exits_with_2(capsys):
    assert main(["3", "cat", "--log-level", "chatty"]) == 2
    assert "chatty" in capsys.readouterr().err


def test_typo_in_config_exits_with_2(tmp_path, capsys):
    cfg = tmp_path / "cfg.json"
    cfg.write_text('{"clod": {"group_size": 1}}')
    assert main(["3", "cat", "--config", str(cfg)]) == 2
    assert "clod" in capsys.readouterr().err

import io
import json

from main import main


def test_scores_a_json_file(tmp_path, capsys):
    path = tmp_path / "attempt.json"
    path.write_text(json.dumps({
        "transcript": "hello how are you",
        "referenceText": "hello how are you",
        "audioStats": {"wordsPerMinute": 130, "silenceRatio": 0.1},
    }), encoding="utf-8")

    assert main([str(path)]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["pronunciation"] == 100
    assert output["diagnostics"]["locale"] == "en-US"


def test_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"transcript": "안녕하세요 반가워요"}'))
    assert main([]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["diagnostics"]["locale"] == "ko-KR"
    assert output["diagnostics"]["hasReference"] is False


def test_invalid_json_exits_with_2(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    assert main([str(path)]) == 2


def test_non_object_exits_with_2(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert main([str(path)]) == 2


def test_missing_file_exits_with_2(tmp_path):
    assert main([str(tmp_path / "nope.json")]) == 2

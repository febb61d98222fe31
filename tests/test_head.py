from rolloutlist.head import read_head


def test_reads_first_five_records_skipping_blank_and_invalid(tmp_path):
    path = tmp_path / "r.jsonl"
    lines = ["", '{"a": 1}', "not json", "   ", "2", '"s"', "null", "[1, 2]", '{"late": true}']
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    assert read_head(path) == [{"a": 1}, 2, "s", None, [1, 2]]


def test_short_file_returns_all_records(tmp_path):
    path = tmp_path / "r.jsonl"
    path.write_text('{"a": 1}\n{"b": 2}', encoding="utf-8")
    assert read_head(path) == [{"a": 1}, {"b": 2}]


def test_missing_file_yields_empty_head(tmp_path):
    assert read_head(tmp_path / "missing.jsonl") == []


def test_custom_limit(tmp_path):
    path = tmp_path / "r.jsonl"
    path.write_text("".join(f"{i}\n" for i in range(10)), encoding="utf-8")
    assert read_head(path, max_records=2) == [0, 1]
    assert read_head(path, max_records=0) == []

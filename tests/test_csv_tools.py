import pytest

from algopad.csv_tools import (
    combine_csv,
    generate_comma_list,
    main_combine,
    main_comma_list,
)


@pytest.fixture
def csv_dir(tmp_path):
    (tmp_path / "a.csv").write_text("h1,h2\n1,2\n", encoding="utf-8")
    (tmp_path / "b.csv").write_text("h1,h2\n3,4\n5,6\n", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignore me\n", encoding="utf-8")
    return tmp_path


def test_combine_keeps_first_header_only(csv_dir):
    names = combine_csv(csv_dir)
    assert names == ["a.csv", "b.csv"]
    combined = (csv_dir / "combined_output.csv").read_text(encoding="utf-8")
    assert combined == "h1,h2\n1,2\n3,4\n5,6\n"
    assert combined.count("h1,h2") == 1


def test_combine_strips_crlf(tmp_path):
    (tmp_path / "a.csv").write_bytes(b"h\r\nx\r\n")
    (tmp_path / "b.csv").write_bytes(b"h\r\ny\r\n")
    combine_csv(tmp_path)
    assert (tmp_path / "combined_output.csv").read_bytes() == b"h\nx\ny\n"


def test_combine_appends_on_second_run(csv_dir, tmp_path_factory):
    out = tmp_path_factory.mktemp("out") / "merged.csv"
    combine_csv(csv_dir, out)
    first = out.read_text(encoding="utf-8")
    combine_csv(csv_dir, out)
    assert out.read_text(encoding="utf-8") == first * 2


def test_combine_without_csv_files(tmp_path):
    (tmp_path / "notes.txt").write_text("x\n", encoding="utf-8")
    assert combine_csv(tmp_path) == []
    assert not (tmp_path / "combined_output.csv").exists()


def test_generate_comma_list(tmp_path):
    source = tmp_path / "rows.txt"
    source.write_text("a\nb\nc\n", encoding="utf-8")
    out = tmp_path / "out.txt"
    assert generate_comma_list(source, "x", out) == ("a,b,c", "x,x,x")
    assert out.read_text(encoding="utf-8") == "a,b,c\nx,x,x\n"


def test_generate_comma_list_rows_match_constants(tmp_path):
    source = tmp_path / "rows.txt"
    source.write_text("".join(f"r{i}\n" for i in range(7)), encoding="utf-8")
    first, second = generate_comma_list(source, "k", tmp_path / "out.txt")
    assert len(first.split(",")) == len(second.split(",")) == 7
    assert set(second.split(",")) == {"k"}


def test_generate_comma_list_missing_input(tmp_path):
    with pytest.raises(FileNotFoundError):
        generate_comma_list(tmp_path / "absent.txt", "x", tmp_path / "out.txt")


def test_main_combine(csv_dir, monkeypatch, capsys):
    monkeypatch.chdir(csv_dir)
    assert main_combine([]) == 0
    out = capsys.readouterr().out
    assert 'processing csv file: "a.csv"' in out
    assert "generated combined_output.csv." in out
    assert (csv_dir / "combined_output.csv").exists()


def test_main_comma_list(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "rows.txt").write_text("1\n2\n", encoding="utf-8")
    assert main_comma_list(["-i", "rows.txt", "-c", "v"]) == 0
    written = (tmp_path / "comma.separate.list.output.txt").read_text(encoding="utf-8")
    assert written == "1,2\nv,v\n"
    assert "Input file is rows.txt." in capsys.readouterr().out


def test_main_comma_list_requires_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main_comma_list(["-i", "rows.txt"])
    assert excinfo.value.code == 2


def test_main_comma_list_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main_comma_list(["--inputFile", "absent.txt", "--constantValue", "v"]) == 1
    assert "Error:" in capsys.readouterr().err
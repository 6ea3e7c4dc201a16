import pandas as pd
import pytest
from babbler.utils.corpus_reader import load_corpus, read_csv_corpus, read_text_corpus


def test_read_text_corpus(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("Hello world\nagain", encoding="utf-8")
    assert read_text_corpus(str(path)) == "Hello world\nagain"


def test_read_csv_corpus_first_column(tmp_path):
    path = tmp_path / "comments.csv"
    path.write_text("hello world,positive\nthis is a test,negative\n", encoding="utf-8")
    assert read_csv_corpus(str(path)) == "hello world this is a test"


def test_read_csv_corpus_named_column(tmp_path):
    path = tmp_path / "comments.csv"
    path.write_text("label,comment\npos,nice one\nneg,bad one\n", encoding="utf-8")
    assert read_csv_corpus(str(path), header=0, column="comment") == "nice one bad one"


def test_read_csv_corpus_skips_missing_cells(mocker):
    mocker.patch("pandas.read_csv",
                 return_value=pd.DataFrame({"column1": ["a", None, "b"]}))
    assert read_csv_corpus("dummy_path.csv") == "a b"


def test_read_csv_corpus_empty(mocker):
    mocker.patch("pandas.read_csv", return_value=pd.DataFrame(columns=["column1"]))
    assert read_csv_corpus("dummy_path.csv") == ""


def test_read_csv_corpus_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_csv_corpus(str(tmp_path / "missing.csv"))


def test_load_corpus_joins_files_with_space(tmp_path):
    text_path = tmp_path / "a.txt"
    text_path.write_text("ends here", encoding="utf-8")
    csv_path = tmp_path / "b.CSV"
    csv_path.write_text("starts there\n", encoding="utf-8")

    assert load_corpus([str(text_path), str(csv_path)]) == "ends here starts there"


def test_load_corpus_requires_paths():
    with pytest.raises(ValueError):
        load_corpus([])

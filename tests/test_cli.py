import sys

from arabic_tfidf.cli import main


def test_normalize_command(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["arabic-tfidf", "normalize", "والكتاب", "مدرسة"])
    main()
    out = capsys.readouterr().out.splitlines()
    assert out == ["والكتاب\tكتاب", "مدرسة\tمدرس"]


def test_list_plugins_command(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["arabic-tfidf", "list-plugins"])
    main()
    out = capsys.readouterr().out
    assert "local_text (static)" in out
    assert "camel" in out
    assert "parquet" in out

from minijava.cli import SUCCESS_MESSAGE, main

VALID = "class Main { public static void main(String[] a) { System.out.println(1); } }"


def test_valid_file(tmp_path, capsys):
    path = tmp_path / "ok.java"
    path.write_text(VALID, encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == SUCCESS_MESSAGE + "\n"


def test_missing_argument(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out.startswith("Erro: Arquivo não fornecido.")


def test_unreadable_file(tmp_path, capsys):
    path = tmp_path / "missing.java"
    assert main([str(path)]) == 1
    assert capsys.readouterr().out == f"Erro: Nao foi possivel abrir o arquivo '{path}'.\n"


def test_syntax_error_goes_to_stdout(tmp_path, capsys):
    path = tmp_path / "bad.java"
    path.write_text(VALID.replace(";", ""), encoding="utf-8")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out.startswith("parser_error.minijava:1:")
    assert SUCCESS_MESSAGE not in captured.out


def test_lexical_error_goes_to_stderr(tmp_path, capsys):
    path = tmp_path / "lex.java"
    path.write_text(VALID.replace("1", "#"), encoding="utf-8")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.endswith("erro: Erro lexico: Token não aceito.\n")
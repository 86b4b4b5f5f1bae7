import pytest

from hashchat.cli import main


def test_main_runs_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    for name in ("slava", "popols", "root", "boom", "tendence", "loordoom", "chokotaco", "bambobi"):
        assert f"Пользователь {name} успешно зарегистрирован" in out
    assert "Ключ найден и удален - admin" in out
    assert "[DELETED]" in out


def test_main_resizes_table(capsys):
    main([])
    out = capsys.readouterr().out
    assert "Изменение хеш-таблицы с 8 в 16" in out
    assert "Кол-во Элементов: 9" in out


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2
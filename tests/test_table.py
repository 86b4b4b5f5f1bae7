import pytest

from hashchat.sha1 import sha1
from hashchat.table import AuthData, HashTable, SlotStatus


@pytest.fixture
def table():
    return HashTable()


def test_new_table_is_empty(table):
    assert table.mem_size == 8
    assert table.data_count == 0
    assert all(slot.status is SlotStatus.FREE for slot in table.data)


def test_register_and_login(table):
    assert table.reg("slava", "password") is True
    assert table.login("slava", "password") is True
    assert table.login("slava", "secret") is False


def test_login_unknown_user(table):
    table.reg("root", "password")
    assert table.login("boom", "password") is False


def test_add_stores_digest(table):
    digest = sha1("password")
    table.add("admin", digest)
    stored = [slot for slot in table.data if slot.status is SlotStatus.ENGAGED]
    assert stored == [AuthData("admin", digest, SlotStatus.ENGAGED)]


def test_remove_then_login_fails(table, capsys):
    table.reg("admin", "password")
    assert table.remove("admin") is True
    assert table.login("admin", "password") is False
    assert table.data_count == 0
    assert any(slot.status is SlotStatus.DELETED for slot in table.data)
    assert "admin" in capsys.readouterr().out


def test_remove_unknown(table, capsys):
    assert table.remove("ghost") is False
    assert "ghost" in capsys.readouterr().out


def test_deleted_slot_is_reused(table):
    table.reg("admin", "password")
    table.remove("admin")
    table.reg("admin", "secret")
    assert table.login("admin", "secret") is True
    assert table.data_count == 1


def test_resize_triggered_by_load(table):
    names = ["slava", "admin", "popols", "root", "boom"]
    for name in names:
        table.reg(name, "password")
    assert table.mem_size == 8
    table.reg("tendence", "password")
    assert table.mem_size == 16
    assert table.data_count == 6
    for name in names + ["tendence"]:
        assert table.login(name, "password") is True


def test_manual_resize_keeps_entries(table):
    table.reg("slava", "password")
    table.reg("root", "secret")
    table.resize()
    assert table.mem_size == 16
    assert table.data_count == 2
    assert table.login("slava", "password") is True
    assert table.login("root", "secret") is True


def test_hash_func_in_range_and_quadratic(table):
    for offset in range(8):
        index = table.hash_func("bambobi", offset)
        assert 0 <= index < table.mem_size
    assert table.hash_func("bambobi", 2) == (table.hash_func("bambobi", 0) + 4) % 8


def test_colliding_logins_are_probed(table):
    table.reg("ab", "password")
    table.reg("ba", "secret")
    assert table.hash_func("ab", 0) == table.hash_func("ba", 0)
    assert table.login("ab", "password") is True
    assert table.login("ba", "secret") is True


def test_probe_sequence_exhaustion(table):
    for name in ("abc", "acb", "bac"):
        assert table.reg(name, "password") is True
    assert table.reg("bca", "password") is False
    assert table.data_count == 3
    assert table.login("bca", "password") is False


def test_too_long_login_rejected(table):
    with pytest.raises(ValueError):
        table.reg("verylonglogin", "password")


def test_show_lists_slots(table, capsys):
    table.reg("slava", "password")
    table.reg("root", "password")
    table.remove("root")
    capsys.readouterr()
    table.show()
    out = capsys.readouterr().out
    assert out.count("[FREE]") == 6
    assert out.count("[DELETED]") == 1
    assert "slava" in out


def test_print_stats(table, capsys):
    table.reg("slava", "password")
    capsys.readouterr()
    table.print_stats()
    out = capsys.readouterr().out
    assert "Размер: 8" in out
    assert "Кол-во Элементов: 1" in out
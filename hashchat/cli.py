"""Demonstration of the login table."""

from __future__ import annotations

import argparse

from hashchat.table import HashTable

_USERS = (
    ("slava", "qwerty12345", 6),
    ("admin", "qwersty12314345", 20),
    ("popols", "qwerty1234s5", 3),
    ("root", "qwerty1fasf234s5", 5),
    ("boom", "gbfb213sva", 7),
    ("tendence", "bhtnrtyrbrb", 355),
    ("loordoom", "qwerty1234s5sa21", 16),
    ("chokotaco", "qww21f", 15),
    ("bambobi", "qwerty998855", 3),
)


def main(argv: list[str] | None = None) -> int:
    """Register sample users, show the table, remove one and show it again."""
    parser = argparse.ArgumentParser(description="Login hash table demonstration.")
    parser.parse_args(argv)

    chat = HashTable()
    for name, secret, length in _USERS:
        chat.reg(name, secret[:length])
    chat.print_stats()
    chat.show()
    chat.remove("admin")
    print()
    chat.login("admin", "qwerty12345")
    chat.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
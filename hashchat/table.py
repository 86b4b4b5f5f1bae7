"""Login table: open addressing with a multiplication hash and quadratic probing."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass

from hashchat.sha1 import sha1

LOGIN_LENGTH = 10
INITIAL_SIZE = 8
LOAD_FACTOR = 0.6
MULTIPLIER = 0.6


class SlotStatus(enum.Enum):
    """State of a table slot."""

    FREE = enum.auto()
    ENGAGED = enum.auto()
    DELETED = enum.auto()


@dataclass
class AuthData:
    """A login paired with the digest of its password."""

    login: str = ""
    pass_hash: tuple[int, ...] | None = None
    status: SlotStatus = SlotStatus.FREE


class HashTable:
    """Stores logins and password digests for the chat."""

    def __init__(self) -> None:
        self.data_count = 0
        self.mem_size = INITIAL_SIZE
        self.data = [AuthData() for _ in range(self.mem_size)]

    def reg(self, name: str, password: bytes | str) -> bool:
        """Register ``name`` with the digest of ``password``."""
        return self.add(name, sha1(password))

    def login(self, name: str, password: bytes | str) -> bool:
        """Return whether ``password`` matches the one stored for ``name``."""
        slot = self._find(name)
        if slot is None:
            return False
        return slot.pass_hash == sha1(password)

    def add(self, name: str, pass_hash: tuple[int, ...]) -> bool:
        """Insert a login and digest; return False if no probed slot was free."""
        if len(name.encode()) >= LOGIN_LENGTH:
            raise ValueError(f"login must be shorter than {LOGIN_LENGTH} bytes: {name!r}")
        for offset in range(self.mem_size):
            if self.data_count >= self.mem_size * LOAD_FACTOR:
                print("Таблица заполнена, необходимо изменить размер...")
                self.resize()
                return self.add(name, pass_hash)
            index = self.hash_func(name, offset)
            slot = self.data[index]
            if slot.status is not SlotStatus.ENGAGED:
                self.data[index] = AuthData(name, tuple(pass_hash), SlotStatus.ENGAGED)
                self.data_count += 1
                print(f"Пользователь {name} успешно зарегистрирован")
                return True
        return False

    def remove(self, name: str) -> bool:
        """Mark the slot holding ``name`` as deleted; return whether it was found."""
        for offset in range(self.mem_size):
            index = self.hash_func(name, offset)
            slot = self.data[index]
            if slot.status is SlotStatus.FREE:
                print(f"Ключ не найден - {name}")
                return False
            if slot.status is SlotStatus.ENGAGED and slot.login == name:
                print(f"Ключ найден и удален - {name} {index}")
                slot.status = SlotStatus.DELETED
                self.data_count -= 1
                return True
        print(f"Ключ не найден после полного поиска - {name}")
        return False

    def resize(self) -> None:
        """Double the table size and reinsert every engaged entry."""
        old_data = self.data
        old_size = self.mem_size
        self.mem_size *= 2
        self.data_count = 0
        self.data = [AuthData() for _ in range(self.mem_size)]
        print(f"Изменение хеш-таблицы с {old_size} в {self.mem_size}")
        for slot in old_data:
            if slot.status is SlotStatus.ENGAGED:
                self.add(slot.login, slot.pass_hash)

    def hash_func(self, name: str, offset: int) -> int:
        """Multiplication-method hash plus a quadratic probe offset."""
        total = sum(name.encode())
        product = MULTIPLIER * total
        base = int(self.mem_size * (product - int(product)))
        return (base + offset * offset) % self.mem_size

    def print_stats(self) -> str:
        """Print the table size and the number of entries, and return the report."""
        report = "\n".join(
            (
                "Статус Хеш-Таблицы:",
                f"Размер: {self.mem_size}",
                f"Кол-во Элементов: {self.data_count}",
            )
        )
        print(report)
        return report

    def show(self) -> None:
        """Print every slot of the table."""
        border = "+-----------+-----------------+---------------+"
        out = sys.stdout
        print(border, file=out)
        print("|   Индекс  |         Ключ    |  Значение     |", file=out)
        print(border, file=out)
        for index, slot in enumerate(self.data):
            if slot.status is SlotStatus.FREE:
                key, value = "[FREE]", " "
            elif slot.status is SlotStatus.DELETED:
                key, value = "[DELETED]", " "
            else:
                key = slot.login
                value = "".join(f"{word:08x}" for word in slot.pass_hash or ())
            print(f"| {index:>9} | {key:>14} | {value:>14} |", file=out)

    def _find(self, name: str) -> AuthData | None:
        for offset in range(self.mem_size):
            slot = self.data[self.hash_func(name, offset)]
            if slot.status is SlotStatus.FREE:
                return None
            if slot.status is SlotStatus.ENGAGED and slot.login == name:
                return slot
        return None
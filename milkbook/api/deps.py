# milkbook/api/deps.py

from milkbook.services.clock import Clock, system_clock


def get_clock() -> Clock:
    return system_clock

"""Module filter type alias.

Python 3.12 PEP 695 type alias syntax.
Filter function: takes a module, returns True to scan it.
"""

from collections.abc import Callable
from types import ModuleType
from typing import TypeAlias

ModuleFilter: TypeAlias = Callable[[ModuleType], bool]

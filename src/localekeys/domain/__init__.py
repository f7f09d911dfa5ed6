"""localekeys domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, types, collections.abc
"""

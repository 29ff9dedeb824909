"""Value objects: immutable data compared by what it holds, not by identity."""

from dataclasses import asdict, fields, is_dataclass


class ValueObject:
    """
    Mixin for frozen dataclasses such as ids, overrides and matching pairs.

    Equality and hashing come from the dataclass decorator on the subclass.
    """

    def to_primitive(self) -> object:
        """Plain value for logs and events; single-field objects collapse to that field."""
        if not is_dataclass(self):
            return self
        names = [f.name for f in fields(self)]
        if len(names) == 1:
            return getattr(self, names[0])
        return asdict(self)

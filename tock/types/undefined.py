from __future__ import annotations


class UndefinedType:
    """The value of forms that produce nothing: `while`, an `if` with no
    alternative, `car` of an empty list."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "undefined"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, UndefinedType)

    def __hash__(self):
        return hash(UndefinedType)


Undefined = UndefinedType()

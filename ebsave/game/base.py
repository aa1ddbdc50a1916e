class GameObject:
    # names of the attributes that make up this object's state.
    # used for equality and repr, so keep it in sync with __init__.
    _fields = ()

    def __init__(self, **kwargs):
        # simple initialization setup where kwargs are
        # copied into the attributes of this new object
        for k, v in kwargs.items():
            if k not in self._fields:
                raise TypeError(
                    f"{type(self).__name__} has no attribute '{k}'"
                    )
            setattr(self, k, v)

    def __eq__(self, other):
        if self is other:
            return True
        elif type(self) is not type(other):
            return NotImplemented

        return all(
            getattr(self, name) == getattr(other, name)
            for name in self._fields
            )

    def __repr__(self):
        return "%s(%s)" % (
            type(self).__name__,
            ", ".join(f"{n}={getattr(self, n)!r}" for n in self._fields)
            )

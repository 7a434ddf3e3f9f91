class CharaEngineError(Exception):
    """Base error."""


class MissingLordPositionError(CharaEngineError, KeyError):
    """Raised when the position of a sign's lord cannot be resolved."""

    def __init__(self, sign):
        self.sign = sign
        super().__init__(f"missing lord position for {sign.name} (lord {sign.lord})")

    def __str__(self) -> str:
        return self.args[0]


class EmptyPartitionError(CharaEngineError, ValueError):
    """Raised when a partition is requested over a total weight of zero."""

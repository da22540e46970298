class CuadreError(ValueError):
    """Base class for reconciliation input errors."""


class InvalidExchangeRate(CuadreError):
    def __init__(self, rate):
        super().__init__(f"Exchange rate must be a positive finite number, got {rate!r}")
        self.rate = rate


class MalformedAmount(CuadreError):
    def __init__(self, field: str, value):
        super().__init__(f"Field '{field}' is not a finite number: {value!r}")
        self.field = field
        self.value = value


class InvalidTolerance(CuadreError):
    def __init__(self, tolerance):
        super().__init__(f"Tolerance must be a non-negative finite number, got {tolerance!r}")
        self.tolerance = tolerance

# linesim/errors.py


class SimulationError(Exception):
    """Base class for every error raised by the simulator."""


class InvalidConfiguration(SimulationError, ValueError):
    """Raised at startup when the run parameters fail validation."""


class EmptyQueue(SimulationError, IndexError):
    """Raised when popping from an event queue that has no events left."""


class InvalidProductType(SimulationError, ValueError):
    def __init__(self, product_type, known_types: int):
        self.product_type = product_type
        self.known_types = known_types
        super().__init__(
            f"Product type {product_type!r} is not in the catalog "
            f"(expected 0..{known_types - 1})"
        )

from tale.types.symbol import Symbol
from tale.types.environment import Environment
from tale.types.closure import Closure
from tale.types.primitive import Primitive

__all__ = ["Symbol", "Environment", "Closure", "Primitive"]

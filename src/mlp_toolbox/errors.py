class MatrixError(Exception):
    pass


class ShapeError(MatrixError, ValueError):
    """Operands (or literal rows) do not have compatible dimensions."""


class NetworkError(Exception):
    pass


class TopologyError(NetworkError, ValueError):
    pass


class InputSizeError(NetworkError, ValueError):
    pass


class TargetSizeError(NetworkError, ValueError):
    pass

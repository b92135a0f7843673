import numpy as np

from mlp_toolbox.conf import WEIGHT_RANGE
from mlp_toolbox.errors import ShapeError


class Matrix:
    """Dense row-major 2-D grid of floats.

    Every arithmetic method returns a new matrix; operands are left as they
    were. The values live in `data`, a float64 ndarray of shape
    (rows, cols).
    """
    def __init__(self, rows, cols, data=None):
        if rows < 1 or cols < 1:
            raise ShapeError('matrix dimensions must be positive, got %dx%d' % (rows, cols))

        self.rows = rows
        self.cols = cols
        if data is None:
            self.data = np.zeros((rows, cols))
        else:
            self.data = np.array(data, dtype=float).reshape((rows, cols))

    @classmethod
    def zeros(cls, rows, cols):
        return cls(rows, cols)

    @classmethod
    def random(cls, rows, cols, rng=None):
        """Entries drawn independently and uniformly from [-1, 1).

        :arg rng: anything with a numpy style ``uniform(low, high, size)``;
                  the global ``numpy.random`` state when omitted
        """
        if rng is None:
            rng = np.random
        low, high = WEIGHT_RANGE
        if rows < 1 or cols < 1:
            raise ShapeError('matrix dimensions must be positive, got %dx%d' % (rows, cols))
        return cls(rows, cols, rng.uniform(low, high, size=(rows, cols)))

    @classmethod
    def from_list(cls, values):
        """Wrap explicit row-major data, the first row defines the width."""
        values = [list(row) for row in values]
        if not values or not values[0]:
            raise ShapeError('cannot build a matrix from empty data')

        cols = len(values[0])
        for i, row in enumerate(values):
            if len(row) != cols:
                raise ShapeError('row %d has %d values, expected %d' % (i, len(row), cols))
        return cls(len(values), cols, values)

    @classmethod
    def column(cls, values):
        return cls.from_list([values]).transpose()

    @property
    def shape(self):
        return (self.rows, self.cols)

    def __getitem__(self, index):
        i, j = index
        return float(self.data[i, j])

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self.data, other.data)

    def __repr__(self):
        return '<matrix %dx%d %s>' % (self.rows, self.cols, self.tolist())

    def tolist(self):
        return self.data.tolist()

    def _check_same_shape(self, other, operation):
        if self.shape != other.shape:
            raise ShapeError('incompatible matrices for %s: %dx%d and %dx%d'
                             % (operation, self.rows, self.cols, other.rows, other.cols))

    def multiply(self, other):
        if self.cols != other.rows:
            raise ShapeError('incompatible matrices for multiply: %dx%d and %dx%d'
                             % (self.rows, self.cols, other.rows, other.cols))
        return Matrix(self.rows, other.cols, np.dot(self.data, other.data))

    def sum(self, other):
        self._check_same_shape(other, 'sum')
        return Matrix(self.rows, self.cols, self.data + other.data)

    def subtract(self, other):
        self._check_same_shape(other, 'subtract')
        return Matrix(self.rows, self.cols, self.data - other.data)

    def dot(self, other):
        """Elementwise (Hadamard) product, not the matrix product."""
        self._check_same_shape(other, 'dot')
        return Matrix(self.rows, self.cols, self.data * other.data)

    def map(self, function):
        values = [[function(value) for value in row] for row in self.data.tolist()]
        return Matrix(self.rows, self.cols, values)

    def transpose(self):
        return Matrix(self.cols, self.rows, self.data.T)

from collections import namedtuple
import math

from scipy.special import expit

## An activation is a pair of scalar functions. The derivative is always
## handed the *activated* value y = function(x), never the raw input x,
## so that backpropagation can reuse the outputs recorded in the forward
## pass instead of evaluating the nonlinearity again.
Activation = namedtuple('Activation', ['name', 'function', 'derivative'])


def sigmoid(x):
    return float(expit(x))


def sigmoid_derivative(y):
    return y * (1.0 - y)


def tanh_derivative(y):
    return 1.0 - y * y


def relu(x):
    return max(0.0, x)


def relu_derivative(y):
    if y > 0.0:
        return 1.0
    return 0.0


SIGMOID = Activation('sigmoid', sigmoid, sigmoid_derivative)
TANH    = Activation('tanh', math.tanh, tanh_derivative)
RELU    = Activation('relu', relu, relu_derivative)

_registry = dict((a.name, a) for a in (SIGMOID, TANH, RELU))


def lookup(name):
    """Return the activation registered under `name`."""
    try:
        return _registry[name]
    except KeyError:
        raise KeyError('unknown activation %r, choose one of %s'
                       % (name, ', '.join(sorted(_registry))))

import logging

from mlp_toolbox.errors import TopologyError, InputSizeError, TargetSizeError
from mlp_toolbox.matrix import Matrix
from mlp_toolbox.train import trainer

logger = logging.getLogger(__name__)

UPDATE_RULES = ('standard', 'legacy')


class Network:
    """Fully connected feed-forward network trained one sample at a time.

    `layers` holds the neuron count of every layer, input first. Transition
    i owns weights[i] (layers[i+1] x layers[i]) and biases[i]
    (layers[i+1] x 1). `data` is the activation history of the last
    forward pass, data[0] being the input column; back_propagate consumes
    it, so the two must be called in pairs for the same sample.
    """
    def __init__(self, layers, activation, learning_rate, update_rule='standard', rng=None):
        layers = list(layers)
        if len(layers) < 2:
            raise TopologyError('a network needs at least an input and an output layer, got %r' % (layers,))
        for size in layers:
            if size < 1:
                raise TopologyError('layer sizes must be positive, got %r' % (layers,))
        if update_rule not in UPDATE_RULES:
            raise ValueError('update_rule must be one of %s, got %r' % (', '.join(UPDATE_RULES), update_rule))

        self.layers = layers
        self.activation = activation
        self.learning_rate = learning_rate
        self.update_rule = update_rule
        self.weights = []
        self.biases = []
        self.data = []

        for size_in, size_out in zip(layers[:-1], layers[1:]):
            self.weights.append(Matrix.random(size_out, size_in, rng))
            self.biases.append(Matrix.random(size_out, 1, rng))

    def __repr__(self):
        return '<network %s %s lr=%s>' % ('-'.join(str(l) for l in self.layers),
                                         getattr(self.activation, 'name', 'custom'),
                                         self.learning_rate)

    def feed_forward(self, inputs):
        inputs = list(inputs)
        if len(inputs) != self.layers[0]:
            raise InputSizeError('input of length %d does not fit an input layer of %d neurons'
                                 % (len(inputs), self.layers[0]))

        current = Matrix.column(inputs)
        self.data = [current]
        for weight, bias in zip(self.weights, self.biases):
            current = weight.multiply(current).sum(bias).map(self.activation.function)
            self.data.append(current)

        logger.debug('forward %s -> %s', inputs, current.tolist())
        return [row[0] for row in current.tolist()]

    predict = feed_forward

    def back_propagate(self, outputs, targets):
        """Adjust weights and biases from one forward pass's outputs.

        Two update rules are available:

        ``standard``
            gradient = lr * derivative(output) * error, W += gradient . a^T,
            with the error handed down through the weights as they were
            before this update.

        ``legacy``
            reproduces the historical rule verbatim: errors as row vectors,
            the first gradient taken from the derivative of the *errors*,
            and W replaced by W^T + gradient . a^T, the error then being
            pushed through the already-updated weight. The shapes only line
            up when every layer has a single neuron; any other topology
            raises ShapeError and the weights and biases are left as they
            were.
        """
        targets = list(targets)
        if len(targets) != self.layers[-1]:
            raise TargetSizeError('%d targets given for an output layer of %d neurons'
                                  % (len(targets), self.layers[-1]))

        if self.update_rule == 'legacy':
            self._legacy_back_propagate(list(outputs), targets)
        else:
            self._standard_back_propagate(list(outputs), targets)

    def _scale(self, value):
        return value * self.learning_rate

    def _standard_back_propagate(self, outputs, targets):
        derivative = self.activation.derivative
        parsed = Matrix.column(outputs)
        errors = Matrix.column(targets).subtract(parsed)
        gradients = parsed.map(derivative)

        for i in reversed(range(len(self.weights))):
            gradients = gradients.dot(errors).map(self._scale)
            weight = self.weights[i]
            self.weights[i] = weight.sum(gradients.multiply(self.data[i].transpose()))
            self.biases[i] = self.biases[i].sum(gradients)

            errors = weight.transpose().multiply(errors)
            gradients = self.data[i].map(derivative)

    def _legacy_back_propagate(self, outputs, targets):
        derivative = self.activation.derivative
        parsed = Matrix.from_list([outputs])
        errors = Matrix.from_list([targets]).subtract(parsed)
        gradients = errors.map(derivative)

        # nothing is stored until every transition has gone through, a
        # ShapeError part way down leaves the network untouched
        weights = list(self.weights)
        biases = list(self.biases)
        for i in reversed(range(len(weights))):
            gradients = gradients.dot(errors).map(self._scale)
            weights[i] = weights[i].transpose().sum(
                gradients.multiply(self.data[i].transpose()))
            biases[i] = biases[i].sum(gradients)

            errors = weights[i].transpose().multiply(errors)
            gradients = self.data[i].map(derivative)

        self.weights = weights
        self.biases = biases

    def train_epoch(self, inputs, targets):
        """One pass over every sample in order, returns the summed squared error."""
        error, ponderation = trainer(self).train(inputs, targets)
        return error

    def train(self, inputs, targets, epochs, progress=None):
        """Train for `epochs` passes over the samples, mutating the network.

        :arg progress: optional ``progress(epoch, epochs, error)`` callable,
                       invoked every time progress is logged
        """
        trainer(self).train_epochs(inputs, targets, epochs, progress)

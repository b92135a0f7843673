import logging

from mlp_toolbox.conf import LOG_PERIODS
from mlp_toolbox.errors import TargetSizeError

logger = logging.getLogger(__name__)


def report_period(epochs):
    """Number of epochs between two progress reports."""
    return max(1, epochs // LOG_PERIODS)


class trainer:
    def __init__(self, module):
        self.module = module

    def train(self, inputs, targets):
        if len(inputs) != len(targets):
            raise TargetSizeError('%d input vectors but %d target vectors' % (len(inputs), len(targets)))

        error = 0.
        ponderation = 0.
        for sample, target in zip(inputs, targets):
            output = self.module.feed_forward(sample)
            outerr = [t - o for t, o in zip(target, output)]
            error += 0.5 * sum(e ** 2 for e in outerr)
            ponderation += len(target)
            self.module.back_propagate(output, target)
        return error, ponderation

    def train_epochs(self, inputs, targets, epochs, progress=None):
        if epochs < 1:
            raise ValueError('epochs must be positive, got %r' % (epochs,))
        if len(inputs) == 0:
            raise ValueError('no samples to train on')

        period = report_period(epochs)
        for epoch in range(1, epochs + 1):
            error, ponderation = self.train(inputs, targets)
            if epoch % period == 0 or epoch == epochs:
                logger.info('Epoch: %d of %d, error %f (%f per output)',
                            epoch, epochs, error, error / ponderation)
                if progress is not None:
                    progress(epoch, epochs, error)

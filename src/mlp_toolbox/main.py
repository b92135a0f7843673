from optparse import OptionParser
import logging

import numpy as np

from mlp_toolbox import conf
from mlp_toolbox.activation import lookup
from mlp_toolbox.dataset import xor_dataset
from mlp_toolbox.network import Network


def parse_layers(option, opt, value, parser):
    setattr(parser.values, option.dest, [int(v) for v in value.split(',')])


def build_parser():
    parser = OptionParser(usage='%prog [options]')
    parser.add_option('-l', '--layers', dest='layers', type='string', action='callback',
                      callback=parse_layers, default=list(conf.LAYERS),
                      help='comma separated layer sizes [default: 2,3,1]')
    parser.add_option('-r', '--rate', dest='learning_rate', type='float',
                      default=conf.LEARNING_RATE, help='learning rate [default: %default]')
    parser.add_option('-e', '--epochs', dest='epochs', type='int',
                      default=conf.EPOCHS, help='training epochs [default: %default]')
    parser.add_option('-a', '--activation', dest='activation',
                      default=conf.ACTIVATION, help='sigmoid, tanh or relu [default: %default]')
    parser.add_option('--legacy', dest='update_rule', action='store_const',
                      const='legacy', default=conf.UPDATE_RULE,
                      help='use the legacy weight update rule')
    parser.add_option('-s', '--seed', dest='seed', type='int', default=None,
                      help='seed for weight initialisation')
    parser.add_option('-d', '--debug', dest='debug', action='store_true', default=False)
    return parser


def main(argv=None):
    (options, args) = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if options.debug else logging.INFO,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')

    rng = None
    if options.seed is not None:
        rng = np.random.RandomState(options.seed)

    network = Network(options.layers, lookup(options.activation), options.learning_rate,
                      update_rule=options.update_rule, rng=rng)
    x = xor_dataset()
    network.train(x.inputs, x.targets, options.epochs)

    for inp in ([0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]):
        print('%d, %d: %s' % (inp[0], inp[1], network.feed_forward(inp)))
    return 0


if __name__ == '__main__':
    main()

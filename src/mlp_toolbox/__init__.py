from mlp_toolbox.errors import (MatrixError, ShapeError, NetworkError,
                                TopologyError, InputSizeError,
                                TargetSizeError)
from mlp_toolbox.matrix import Matrix
from mlp_toolbox.activation import Activation, SIGMOID, TANH, RELU
from mlp_toolbox.network import Network
from mlp_toolbox.dataset import supervised, xor_dataset

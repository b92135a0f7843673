## Defaults for the XOR demonstration and for weight initialisation.
LAYERS        = [2, 3, 1]
LEARNING_RATE = 0.5
EPOCHS        = 10000
ACTIVATION    = 'sigmoid'

## 'standard' or 'legacy', see network.Network.back_propagate
UPDATE_RULE   = 'standard'

## uniform initialisation range, [low, high)
WEIGHT_RANGE  = (-1.0, 1.0)

## training progress is reported this many times per run
LOG_PERIODS   = 100

class supervised:
    """Paired input and target vectors, kept in the order they were added."""
    def __init__(self, inp, target):
        self.indim = inp
        self.outdim = target
        self.inputs = []
        self.targets = []

    def add_sample(self, inp, target):
        inp = [float(v) for v in inp]
        target = [float(v) for v in target]
        if len(inp) != self.indim:
            raise ValueError('input of length %d, expected %d' % (len(inp), self.indim))
        if len(target) != self.outdim:
            raise ValueError('target of length %d, expected %d' % (len(target), self.outdim))

        self.inputs.append(inp)
        self.targets.append(target)

    def __len__(self):
        return len(self.inputs)

    def __iter__(self):
        return iter(list(zip(self.inputs, self.targets)))


def xor_dataset():
    x = supervised(2, 1)
    x.add_sample([0, 0], [0])
    x.add_sample([1, 0], [1])
    x.add_sample([0, 1], [1])
    x.add_sample([1, 1], [0])
    return x

# Mark V. Shaney: a word-level Markov chain mapping the last PREFIX_LENGTH
# words to the frequency-weighted bag of words that followed them.

from random import randrange


PREFIX_LENGTH = 2

INITIAL = ('',) * PREFIX_LENGTH
TERMINAL = ''  # never a valid input word


def shift(prefix, word):
    return prefix[1:] + (word,)


class WordBag(dict):  # word -> count
    def add(self, word):
        self[word] = self.get(word, 0) + 1

    def total(self):
        return sum(self.values())

    def draw(self, rand=randrange):
        tot = self.total()
        assert tot > 0, 'draw from an empty bag'
        r = rand(tot)
        acc = 0
        for word, count in self.items():
            acc += count
            if r < acc:
                return word
        # only if the bag changed under us
        raise AssertionError('entry out of range')


class Chain:
    def __init__(self):
        self.model = {}

    def __len__(self):
        return len(self.model)

    def transitions(self):
        return sum(bag.total() for bag in self.model.values())

    def add(self, prefix, word):
        assert len(prefix) == PREFIX_LENGTH, 'bad prefix length'
        assert word != TERMINAL, 'terminal marker is not a word'
        bag = self.model.get(prefix)
        if bag is None:
            bag = self.model[prefix] = WordBag()
        bag.add(word)

    def walk(self, prefix, rand=randrange):
        bag = self.model.get(prefix)
        if bag is None:
            return TERMINAL
        return bag.draw(rand)

    def generate(self, rand=randrange):
        # stops at the first unrecorded prefix; a fully cyclic chain never
        # does, so slice the generator to bound it
        prefix = INITIAL
        while True:
            word = self.walk(prefix, rand)
            if word == TERMINAL:
                return
            yield word
            prefix = shift(prefix, word)

    def document(self, rand=randrange):
        return list(self.generate(rand))

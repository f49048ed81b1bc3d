import pytest

from shaney import Chain
import corpus


CAT_DOG = 'the cat sat. the dog sat.'


@pytest.fixture
def cat_dog():
    chain = Chain()
    corpus.feed(chain, CAT_DOG)
    return chain

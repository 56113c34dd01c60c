import pytest
import matplotlib
matplotlib.use('Agg')

import modlogscale.MLConfig as mlconf
from modlogscale import ModifiedLogScale


@pytest.fixture
def scale():
    """Base 10 scale with the default domain."""
    return ModifiedLogScale(10)


@pytest.fixture
def symmetric_scale():
    """Base 10 scale over [-100, 100] drawn onto [0, 400]."""
    s = ModifiedLogScale(10)
    s.setDomain(-100, 100)
    s.setRange(0, 400)
    return s


@pytest.fixture
def verbose():
    """Turn on stderr reporting for one test."""
    previous = mlconf.ml_verbose
    mlconf.ml_verbose = True
    yield
    mlconf.ml_verbose = previous

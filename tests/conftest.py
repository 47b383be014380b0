import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture(autouse=True)
def _isolated_rcparams():
    with matplotlib.rc_context():
        yield

import pytest

from tock.config import DriverConfig
from tock.host.sink import BufferedSink
from tock.host.surface import RasterSurface
from tock.interpreter import Interpreter

# Interpreter-level tests run twice:
# 1) "uninterrupted": the default pause threshold, so short programs finish in
#    one quantum.
# 2) "pausing": a pause after every third loop pass, so any program with a loop
#    is suspended and resumed many times. Results must not change.

DRIVER_CONFIGS = {
    "uninterrupted": DriverConfig(quantum_ms=60_000),
    "pausing": DriverConfig(quantum_ms=60_000, pause_every=3),
}


@pytest.fixture(params=sorted(DRIVER_CONFIGS))
def driver_config(request):
    return DRIVER_CONFIGS[request.param]


@pytest.fixture
def sink():
    return BufferedSink()


@pytest.fixture
def surface():
    s = RasterSurface()
    s.create("canvas", 10, 10)
    return s


@pytest.fixture
def interp(driver_config, sink, surface):
    """Fresh interpreter wired to in-memory capabilities."""
    return Interpreter(sink=sink, surface=surface, config=driver_config)

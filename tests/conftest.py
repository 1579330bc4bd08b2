import pytest

from config import Config, EnhancementConfig
from scorer.catalog import load_catalog
from scorer.engine import ScoringEngine
from scorer.extractor import SignalExtractor


@pytest.fixture(scope="session")
def catalog():
    return load_catalog()


@pytest.fixture
def tech(catalog):
    return catalog.get("tech")


@pytest.fixture
def extractor(catalog):
    return SignalExtractor(catalog)


@pytest.fixture
def engine(extractor):
    return ScoringEngine(extractor)


@pytest.fixture
def fast_config():
    """Config without pacing delay between generator calls."""
    return Config(enhancement=EnhancementConfig(delay_seconds=0))

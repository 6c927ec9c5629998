from random import Random

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--seed",
        action="store",
        type=int,
        default=2024,
        help="Seed of the random generator used to draw field elements",
    )


@pytest.fixture
def rng(request):
    return Random(request.config.getoption("--seed"))

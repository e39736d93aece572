from dataclasses import replace

import pytest
from bs4 import BeautifulSoup

from projectfoam.app.config import TestConfig
from projectfoam.app.factory import create_app
from projectfoam.app.fixtures import PRECISION_AUTO_DETAILING
from projectfoam.app.models import Review
from projectfoam.app.repository import InMemoryProfileRepository


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    yield app


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def runner(app):
    return app.test_cli_runner()


# a second business with a short gallery and an out-of-range review, for the
# slug-keyed repository tests
@pytest.fixture()
def other_profile():
    return replace(
        PRECISION_AUTO_DETAILING,
        slug="foam-brothers",
        name="Foam Brothers Mobile Wash",
        is_open=False,
        rating=7.2,
        gallery=("/foam-1.jpg", "/foam-2.jpg"),
        reviews=(
            Review(name="Dana K.", location="Reston, VA", stars=-2, date="Feb 2026", text="Never showed up."),
        ),
    )


@pytest.fixture()
def multi_app(other_profile):
    repo = InMemoryProfileRepository([PRECISION_AUTO_DETAILING, other_profile])
    return create_app(TestConfig, repository=repo)


@pytest.fixture()
def multi_client(multi_app):
    with multi_app.test_client() as client:
        yield client


@pytest.fixture()
def soup():
    def parse(response) -> BeautifulSoup:
        return BeautifulSoup(response.get_data(as_text=True), "html.parser")

    return parse

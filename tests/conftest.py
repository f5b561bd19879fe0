import pytest

from fluentvideos.catalog import Catalog
from fluentvideos.models import Section, Video


@pytest.fixture
def catalog() -> Catalog:
    return Catalog(
        [
            Section(
                title="Intro",
                videos=(
                    Video(title="Getting Started", link="https://example.com/start"),
                    Video(title="Setup", link="https://example.com/setup"),
                ),
            ),
            Section(
                title="Advanced",
                videos=(Video(title="Custom Layouts", link="https://example.com/layouts"),),
            ),
        ]
    )

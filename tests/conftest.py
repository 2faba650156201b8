# tests/conftest.py
import pytest
import structlog
from unittest.mock import MagicMock

from phrasekit.adapters.translation_table import TranslationTableLocalizer
from phrasekit.core.domain.models import TermTriple


@pytest.fixture
def box_terms():
    """The canonical triple with a distinct dual form."""
    return TermTriple(singular="box", plural="boxes", dual="pair of boxes")


@pytest.fixture
def mock_translator():
    """Returns a mock translator callable that tags every key it is asked for."""
    return MagicMock(side_effect=lambda key, *args: f"<{key}>")


@pytest.fixture
def french_localizer():
    """A small French translation table."""
    return TranslationTableLocalizer(
        {
            "and": "et",
            "box": "boîte",
            "boxes": "boîtes",
            "pair of boxes": "paire de boîtes",
            "three": "trois",
            "{0} boxes": "{0} boîtes",
        },
        locale="fr",
    )


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keeps configure_logging() calls from leaking into log-capturing tests."""
    yield
    structlog.reset_defaults()

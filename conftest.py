import pytest
from rest_framework.test import APIClient

from apps.reviews.sample_data import load_sample_data


@pytest.fixture
def api_client():
    """Return an API client (the API has no authentication)."""
    return APIClient()


@pytest.fixture
def seeded_db(db):
    """Load the sample categories, users, reviews and comments."""
    return load_sample_data()

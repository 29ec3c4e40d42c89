import pytest
from apps.categories.models import Category
from apps.reviews.models import Review, Comment
from apps.users.models import User


@pytest.fixture
def review_user(db):
    """Create and return a user who owns reviews."""
    return User.objects.create(
        username='tabletop_tom',
        name='Tom',
        avatar_url='https://example.com/avatars/tom.png',
    )


@pytest.fixture
def review_other_user(db):
    """Create and return another user for comments."""
    return User.objects.create(
        username='meeple_mary',
        name='Mary',
        avatar_url='https://example.com/avatars/mary.png',
    )


@pytest.fixture
def strategy_category(db):
    """Create a strategy category."""
    return Category.objects.create(slug='strategy', description='Think ahead')


@pytest.fixture
def review(db, review_user, strategy_category):
    """Create and return a test review."""
    return Review.objects.create(
        title='Twilight Imperium',
        review_body='Clear your weekend.',
        designer='Christian T. Petersen',
        category=strategy_category,
        owner=review_user,
        votes=3,
    )


@pytest.fixture
def comment(db, review, review_other_user):
    """Create a comment on the test review."""
    return Comment.objects.create(
        review=review,
        author=review_other_user,
        body='Took us three sittings.',
        votes=2,
    )

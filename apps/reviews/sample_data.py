"""
Sample board game data.

Used by the ``create_sample_data`` management command and by the test
suite's ``seeded_db`` fixture:

- 4 categories (``children's games`` has no reviews, ``dexterity`` has one)
- 4 users
- 13 reviews
- 6 comments (3 on review 2, 3 on review 3)
"""

from datetime import datetime, timezone

from django.core.management.color import no_style
from django.db import connection, transaction

from apps.categories.models import Category
from apps.reviews.models import Comment, Review
from apps.users.models import User


def _ts(value):
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


CATEGORIES = [
    {'slug': 'euro game', 'description': 'Abstact games that involve little luck'},
    {'slug': 'social deduction', 'description': "Players attempt to uncover each other's hidden role"},
    {'slug': 'dexterity', 'description': 'Games involving physical skill'},
    {'slug': "children's games", 'description': 'Games suitable for children'},
]

USERS = [
    {
        'username': 'mallionaire',
        'name': 'haz',
        'avatar_url': 'https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg',
    },
    {
        'username': 'philippaclaire9',
        'name': 'philippa',
        'avatar_url': 'https://avatars2.githubusercontent.com/u/24604688?s=460&v=4',
    },
    {
        'username': 'bainesface',
        'name': 'sarah',
        'avatar_url': 'https://avatars2.githubusercontent.com/u/24394918?s=400&v=4',
    },
    {
        'username': 'dav3rid',
        'name': 'dave',
        'avatar_url': 'https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.jpg',
    },
]

REVIEWS = [
    {
        'review_id': 1,
        'title': 'Agricola',
        'designer': 'Uwe Rosenberg',
        'owner_id': 'mallionaire',
        'review_img_url': 'https://images.pexels.com/photos/974314/pexels-photo-974314.jpeg?w=700&h=700',
        'review_body': 'Farmyard fun!',
        'category_id': 'euro game',
        'created_at': _ts('2021-01-18T10:00:20.514'),
        'votes': 1,
    },
    {
        'review_id': 2,
        'title': 'Jenga',
        'designer': 'Leslie Scott',
        'owner_id': 'philippaclaire9',
        'review_img_url': 'https://images.pexels.com/photos/4473494/pexels-photo-4473494.jpeg?w=700&h=700',
        'review_body': 'Fiddly fun for all the family',
        'category_id': 'dexterity',
        'created_at': _ts('2021-01-18T10:01:41.251'),
        'votes': 5,
    },
    {
        'review_id': 3,
        'title': 'Ultimate Werewolf',
        'designer': 'Akihisa Okui',
        'owner_id': 'bainesface',
        'review_img_url': 'https://images.pexels.com/photos/5350049/pexels-photo-5350049.jpeg?w=700&h=700',
        'review_body': "We couldn't find the werewolf!",
        'category_id': 'social deduction',
        'created_at': _ts('2021-01-18T10:01:41.251'),
        'votes': 5,
    },
    {
        'review_id': 4,
        'title': 'Dolor reprehenderit',
        'designer': 'Gamey McGameface',
        'owner_id': 'mallionaire',
        'review_img_url': 'https://images.pexels.com/photos/7193350/pexels-photo-7193350.jpeg?w=700&h=700',
        'review_body': 'Consequat velit occaecat voluptate do. Dolor pariatur fugiat sint et proident ex do consequat est.',
        'category_id': 'social deduction',
        'created_at': _ts('2021-01-22T11:35:50.936'),
        'votes': 7,
    },
    {
        'review_id': 5,
        'title': 'Proident tempor et.',
        'designer': 'Seymour Buttz',
        'owner_id': 'mallionaire',
        'review_img_url': 'https://images.pexels.com/photos/209728/pexels-photo-209728.jpeg?w=700&h=700',
        'review_body': 'Labore occaecat sunt qui commodo anim anim aliqua adipisicing aliquip fugiat.',
        'category_id': 'social deduction',
        'created_at': _ts('2021-01-07T09:06:08.077'),
        'votes': 5,
    },
    {
        'review_id': 6,
        'title': 'Occaecat consequat officia in quis commodo.',
        'designer': 'Ollie Tabooger',
        'owner_id': 'mallionaire',
        'review_img_url': 'https://images.pexels.com/photos/207924/pexels-photo-207924.jpeg?w=700&h=700',
        'review_body': 'Fugiat fugiat enim officia laborum quis. Aliquip laboris non nulla nostrud magna exercitation in.',
        'category_id': 'social deduction',
        'created_at': _ts('2020-09-13T14:19:28.077'),
        'votes': 8,
    },
    {
        'review_id': 7,
        'title': 'Mollit elit qui incididunt veniam occaecat cupidatat',
        'designer': 'Avery Wunzboogerz',
        'owner_id': 'mallionaire',
        'review_img_url': 'https://images.pexels.com/photos/278888/pexels-photo-278888.jpeg?w=700&h=700',
        'review_body': 'Consectetur incididunt aliquip sunt officia. Magna ex nulla consectetur laboris incididunt ea non qui.',
        'category_id': 'social deduction',
        'created_at': _ts('2021-01-25T11:16:54.963'),
        'votes': 9,
    },
    {
        'review_id': 8,
        'title': 'One Night Ultimate Werewolf',
        'designer': 'Akihisa Okui',
        'owner_id': 'mallionaire',
        'review_img_url': 'https://images.pexels.com/photos/5350049/pexels-photo-5350049.jpeg?w=700&h=700',
        'review_body': 'hi',
        'category_id': 'social deduction',
        'created_at': _ts('2021-01-18T10:01:41.251'),
        'votes': 5,
    },
    {
        'review_id': 9,
        'title': 'A truly Quacking Game; Quacks of Quedlinburg',
        'designer': 'Wolfgang Warsch',
        'owner_id': 'mallionaire',
        'review_img_url': 'https://images.pexels.com/photos/279321/pexels-photo-279321.jpeg?w=700&h=700',
        'review_body': 'Ever wish you could try your hand at mixing potions? Quacks of Quedlinburg will have you mixing up a homebrew like no other.',
        'category_id': 'social deduction',
        'created_at': _ts('2021-01-18T10:01:41.251'),
        'votes': 10,
    },
    {
        'review_id': 10,
        'title': 'Build you own tour de Yorkshire',
        'designer': 'Asger Harding Granerud',
        'owner_id': 'mallionaire',
        'review_img_url': 'https://images.pexels.com/photos/258148/pexels-photo-258148.jpeg?w=700&h=700',
        'review_body': 'Cold rain pours on the faces of your team of cyclists, you pulled to the front of the pack early and now you are taking on exhaustion cards like there is no tomorrow.',
        'category_id': 'social deduction',
        'created_at': _ts('2021-01-18T10:01:41.251'),
        'votes': 10,
    },
    {
        'review_id': 11,
        'title': "That's just what an evil person would say!",
        'designer': 'Fiona Lohoar',
        'owner_id': 'mallionaire',
        'review_img_url': 'https://images.pexels.com/photos/220057/pexels-photo-220057.jpeg?w=700&h=700',
        'review_body': 'If you are a fan of werewolf, this is the game for you. Suspicion everywhere, trust nobody.',
        'category_id': 'social deduction',
        'created_at': _ts('2021-01-18T10:01:41.251'),
        'votes': 8,
    },
    {
        'review_id': 12,
        'title': "Scythe; you're gonna need a bigger table!",
        'designer': 'Jamey Stegmaier',
        'owner_id': 'mallionaire',
        'review_img_url': 'https://images.pexels.com/photos/4200740/pexels-photo-4200740.jpeg?w=700&h=700',
        'review_body': 'Spend 30 minutes just setting up all of the boards and cards on the table. This is not a game for the faint hearted.',
        'category_id': 'social deduction',
        'created_at': _ts('2021-01-22T10:37:04.839'),
        'votes': 100,
    },
    {
        'review_id': 13,
        'title': "Settlers of Catan: Don't Settle For Less",
        'designer': 'Klaus Teuber',
        'owner_id': 'mallionaire',
        'review_img_url': 'https://images.pexels.com/photos/1153929/pexels-photo-1153929.jpeg?w=700&h=700',
        'review_body': 'You have stumbled across an uncharted island rich in natural resources, but you are not alone.',
        'category_id': 'social deduction',
        'created_at': _ts('1970-01-10T02:08:38.400'),
        'votes': 16,
    },
]

COMMENTS = [
    {
        'comment_id': 1,
        'body': 'I loved this game too!',
        'votes': 16,
        'author_id': 'bainesface',
        'review_id': 2,
        'created_at': _ts('2017-11-22T12:43:33.389'),
    },
    {
        'comment_id': 2,
        'body': 'My dog loved this game too!',
        'votes': 13,
        'author_id': 'mallionaire',
        'review_id': 3,
        'created_at': _ts('2021-01-18T10:09:05.410'),
    },
    {
        'comment_id': 3,
        'body': "I didn't know dogs could play games",
        'votes': 10,
        'author_id': 'philippaclaire9',
        'review_id': 3,
        'created_at': _ts('2021-01-18T10:09:48.110'),
    },
    {
        'comment_id': 4,
        'body': 'EPIC board game!',
        'votes': 16,
        'author_id': 'bainesface',
        'review_id': 2,
        'created_at': _ts('2017-11-22T12:36:03.389'),
    },
    {
        'comment_id': 5,
        'body': 'Now this is a story all about how, board games turned my life upside down',
        'votes': 13,
        'author_id': 'mallionaire',
        'review_id': 2,
        'created_at': _ts('2021-01-18T10:24:05.410'),
    },
    {
        'comment_id': 6,
        'body': 'Not sure about dogs, but my cat likes to get involved with board games',
        'votes': 10,
        'author_id': 'philippaclaire9',
        'review_id': 3,
        'created_at': _ts('2021-03-27T19:48:58.110'),
    },
]


def clear_sample_data():
    """Delete every review, comment, user and category."""
    Comment.objects.all().delete()
    Review.objects.all().delete()
    User.objects.all().delete()
    Category.objects.all().delete()


@transaction.atomic
def load_sample_data():
    """
    Insert the sample rows with their fixed primary keys.

    Auto-increment sequences are reset afterwards so rows created later do
    not collide with the fixed ids.

    Returns:
        Dict with the created ``categories``, ``users``, ``reviews`` and
        ``comments`` lists.
    """
    categories = Category.objects.bulk_create([Category(**row) for row in CATEGORIES])
    users = User.objects.bulk_create([User(**row) for row in USERS])
    reviews = Review.objects.bulk_create([Review(**row) for row in REVIEWS])
    comments = Comment.objects.bulk_create([Comment(**row) for row in COMMENTS])

    sequence_sql = connection.ops.sequence_reset_sql(no_style(), [Review, Comment])
    if sequence_sql:
        with connection.cursor() as cursor:
            for statement in sequence_sql:
                cursor.execute(statement)

    return {
        'categories': categories,
        'users': users,
        'reviews': reviews,
        'comments': comments,
    }

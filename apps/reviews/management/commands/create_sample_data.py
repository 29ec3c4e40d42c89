"""
Management command to create sample data for trying out the API.

Usage:
    python manage.py create_sample_data
    python manage.py create_sample_data --clear

This creates:
- 4 categories (euro game, social deduction, dexterity, children's games)
- 4 users (mallionaire, philippaclaire9, bainesface, dav3rid)
- 13 reviews
- 6 comments
"""

import structlog
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from apps.categories.models import Category
from apps.reviews.sample_data import clear_sample_data, load_sample_data

logger = structlog.get_logger(__name__)


class Command(BaseCommand):
    help = 'Create sample board game data for testing the API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing data before creating new sample data',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write('Clearing existing data...')
            clear_sample_data()
        elif Category.objects.exists():
            raise CommandError('Database already has data. Re-run with --clear to replace it.')

        self.stdout.write('Creating sample data...')
        created = load_sample_data()

        logger.info(
            'sample_data_created',
            categories=len(created['categories']),
            users=len(created['users']),
            reviews=len(created['reviews']),
            comments=len(created['comments']),
        )

        self.stdout.write(self.style.SUCCESS('Sample data created successfully!'))
        self.stdout.write('')
        self.stdout.write('Try:')
        self.stdout.write('  GET /api/reviews?category=dexterity')
        self.stdout.write('  GET /api/reviews?sort_by=votes&order_by=asc&limit=5&p=2')

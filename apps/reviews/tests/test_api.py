import logging

import pytest
from unittest.mock import patch
from django.urls import reverse
from rest_framework import status

from apps.reviews.models import Comment, Review
from apps.reviews.services.exceptions import ReviewStorageError


def review_url(review_id):
    return reverse('reviews:review-detail', kwargs={'review_id': review_id})


def comments_url(review_id):
    return reverse('reviews:review-comments', kwargs={'review_id': review_id})


def comment_url(comment_id):
    return reverse('comments:comment-detail', kwargs={'comment_id': comment_id})


# =============================================================================
# Review Listing Tests
# =============================================================================

@pytest.mark.django_db
class TestReviewList:
    """Tests for GET /api/reviews"""

    def test_list_reviews_defaults(self, api_client, seeded_db):
        """First page of 10, newest first, with the full total."""
        url = reverse('reviews:review-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        rows = response.data['reviews']['rows']
        assert len(rows) == 10
        assert response.data['reviews']['total_count'] == 13
        created = [row['created_at'] for row in rows]
        assert created == sorted(created, reverse=True)

    def test_list_reviews_row_shape(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        response = api_client.get(url)

        for row in response.data['reviews']['rows']:
            assert set(row) == {
                'review_id', 'title', 'review_body', 'designer', 'category',
                'review_img_url', 'owner', 'votes', 'created_at', 'comment_count',
            }

    def test_list_reviews_with_trailing_slash(self, api_client, seeded_db):
        response = api_client.get('/api/reviews/')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['reviews']['total_count'] == 13

    def test_filter_by_category(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        response = api_client.get(url, {'category': 'dexterity'})

        assert response.status_code == status.HTTP_200_OK
        rows = response.data['reviews']['rows']
        assert len(rows) == 1
        assert rows[0]['title'] == 'Jenga'
        assert rows[0]['comment_count'] == 3
        assert response.data['reviews']['total_count'] == 1

    def test_category_without_reviews(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        response = api_client.get(url, {'category': "children's games"})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['reviews'] == {'rows': [], 'total_count': 0}

    def test_unknown_category(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        response = api_client.get(url, {'category': 'bananas'})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'message': 'Not Found'}

    def test_sort_by_votes_ascending(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        response = api_client.get(url, {'sort_by': 'votes', 'order_by': 'asc'})

        votes = [row['votes'] for row in response.data['reviews']['rows']]
        assert votes == sorted(votes)

    def test_sort_by_comment_count(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        response = api_client.get(url, {'sort_by': 'comment_count'})

        counts = [row['comment_count'] for row in response.data['reviews']['rows']]
        assert counts == sorted(counts, reverse=True)
        assert counts[:2] == [3, 3]

    def test_order_by_is_case_insensitive(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        response = api_client.get(url, {'sort_by': 'votes', 'order_by': 'DESC'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['reviews']['rows'][0]['votes'] == 100

    def test_second_page(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        response = api_client.get(url, {'limit': '10', 'p': '2'})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['reviews']['rows']) == 3
        assert response.data['reviews']['total_count'] == 13

    def test_page_alias(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        response = api_client.get(url, {'limit': '5', 'page': '3'})

        assert len(response.data['reviews']['rows']) == 3

    def test_total_count_ignores_limit(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        response = api_client.get(url, {'p': '1', 'limit': '1'})

        assert len(response.data['reviews']['rows']) == 1
        assert response.data['reviews']['total_count'] == 13

    def test_huge_limit(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        response = api_client.get(url, {'limit': '99999999999999999999'})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['reviews']['rows']) == 13
        assert response.data['reviews']['total_count'] == 13

    def test_huge_page(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        response = api_client.get(url, {'p': '99999999999999999999'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['reviews'] == {'rows': [], 'total_count': 13}

    def test_empty_params_use_defaults(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        response = api_client.get(url, {'sort_by': '', 'order_by': '', 'category': '', 'limit': '', 'p': ''})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data['reviews']['rows']) == 10

    @pytest.mark.parametrize('params', [
        {'sort_by': 'bananas'},
        {'order_by': 'bananas'},
        {'limit': 'bananas'},
        {'p': 'bananas'},
        {'sort_by': 'bananas', 'category': 'bananas'},
    ])
    def test_invalid_query(self, api_client, seeded_db, params):
        url = reverse('reviews:review-list')
        response = api_client.get(url, params)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'message': 'Invalid Request'}

    def test_storage_failure(self, api_client, seeded_db, caplog):
        url = reverse('reviews:review-list')
        with patch(
            'apps.reviews.views.DjangoReviewGateway.query_review_page',
            side_effect=ReviewStorageError('connection refused'),
        ):
            response = api_client.get(url)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'message': 'Internal Server Error'}
        assert not [record for record in caplog.records if record.name == 'django.request']

    def test_server_errors_logged_once(self, api_client, seeded_db, caplog):
        url = reverse('reviews:review-list')
        with caplog.at_level(logging.DEBUG), patch(
            'apps.reviews.views.DjangoReviewGateway.query_review_page',
            side_effect=ReviewStorageError('connection refused'),
        ):
            api_client.get(url)

        errors = [record for record in caplog.records if record.levelno >= logging.ERROR]
        assert len(errors) == 1
        assert errors[0].name == 'config.exceptions'


# =============================================================================
# Review Create Tests
# =============================================================================

@pytest.mark.django_db
class TestReviewCreate:
    """Tests for POST /api/reviews"""

    def test_create_review(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        data = {
            'owner': 'mallionaire',
            'title': 'Terraforming Mars',
            'review_body': 'My favourite game!',
            'designer': 'Jacob Fryxelius',
            'category': 'euro game',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['review_id'] == 14
        assert response.data['votes'] == 0
        assert response.data['comment_count'] == 0
        assert Review.objects.count() == 14

    def test_create_review_unknown_category(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        data = {
            'owner': 'mallionaire',
            'title': 'Terraforming Mars',
            'review_body': 'My favourite game!',
            'category': 'bananas',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'message': 'Not Found'}

    def test_create_review_unknown_owner(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        data = {
            'owner': 'bananas',
            'title': 'Terraforming Mars',
            'review_body': 'My favourite game!',
            'category': 'euro game',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'message': 'Not Found'}

    def test_create_review_missing_fields(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        response = api_client.post(url, {'owner': 'mallionaire'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'message': 'Invalid Request'}

    def test_create_review_body_not_object(self, api_client, seeded_db):
        url = reverse('reviews:review-list')
        response = api_client.post(url, ['mallionaire'], format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Single Review Tests
# =============================================================================

@pytest.mark.django_db
class TestReviewDetail:
    """Tests for GET/PATCH/DELETE /api/reviews/{id}"""

    def test_get_review(self, api_client, seeded_db):
        response = api_client.get(review_url(2))

        assert response.status_code == status.HTTP_200_OK
        review = response.data['review']
        assert review['review_id'] == 2
        assert review['title'] == 'Jenga'
        assert review['owner'] == 'philippaclaire9'
        assert review['comment_count'] == 3

    def test_get_review_not_found(self, api_client, seeded_db):
        response = api_client.get(review_url(9999))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data == {'message': 'Not Found'}

    def test_get_review_invalid_id(self, api_client, seeded_db):
        response = api_client.get(review_url('not-an-id'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'message': 'Invalid Request'}

    def test_patch_votes(self, api_client, seeded_db):
        response = api_client.patch(review_url(1), {'inc_votes': 100}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['votes'] == 101

    def test_patch_votes_negative(self, api_client, seeded_db):
        response = api_client.patch(review_url(1), {'inc_votes': -1}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['votes'] == 0

    @pytest.mark.parametrize('data', [{}, {'inc_votes': 'Wooooo bananas'}, {'inc_votes': 1.5}])
    def test_patch_votes_invalid(self, api_client, seeded_db, data):
        response = api_client.patch(review_url(1), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'message': 'Invalid Request'}

    def test_patch_votes_not_found(self, api_client, seeded_db):
        response = api_client.patch(review_url(9999), {'inc_votes': 1}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_review(self, api_client, seeded_db):
        response = api_client.delete(review_url(2))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Review.objects.filter(review_id=2).exists()
        assert not Comment.objects.filter(review_id=2).exists()

    def test_delete_review_not_found(self, api_client, seeded_db):
        response = api_client.delete(review_url(9999))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_method_not_allowed(self, api_client, seeded_db):
        response = api_client.put(review_url(1), {'inc_votes': 1}, format='json')

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert 'message' in response.data


# =============================================================================
# Comment Tests
# =============================================================================

@pytest.mark.django_db
class TestReviewComments:
    """Tests for GET/POST /api/reviews/{id}/comments"""

    def test_list_comments(self, api_client, seeded_db):
        response = api_client.get(comments_url(2))

        assert response.status_code == status.HTTP_200_OK
        comments = response.data['comments']
        assert [comment['comment_id'] for comment in comments] == [5, 1, 4]
        for comment in comments:
            assert set(comment) == {'comment_id', 'review_id', 'author', 'body', 'votes', 'created_at'}
            assert comment['review_id'] == 2

    def test_list_comments_empty(self, api_client, seeded_db):
        response = api_client.get(comments_url(1))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['comments'] == []

    def test_list_comments_review_not_found(self, api_client, seeded_db):
        response = api_client.get(comments_url(9999))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_post_comment(self, api_client, seeded_db):
        data = {'username': 'bainesface', 'body': 'Fiddly but fun'}
        response = api_client.post(comments_url(1), data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['author'] == 'bainesface'
        assert response.data['body'] == 'Fiddly but fun'
        assert response.data['review_id'] == 1
        assert response.data['votes'] == 0

    def test_post_comment_missing_body(self, api_client, seeded_db):
        response = api_client.post(comments_url(1), {'username': 'bainesface'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.data == {'message': 'Invalid Request'}

    def test_post_comment_unknown_user(self, api_client, seeded_db):
        data = {'username': 'bananas', 'body': 'Wooooo'}
        response = api_client.post(comments_url(1), data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_post_comment_review_not_found(self, api_client, seeded_db):
        data = {'username': 'bainesface', 'body': 'Hello'}
        response = api_client.post(comments_url(9999), data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_post_comment_invalid_review_id(self, api_client, seeded_db):
        data = {'username': 'bainesface', 'body': 'Hello'}
        response = api_client.post(comments_url('bananas'), data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
class TestCommentDetail:
    """Tests for PATCH/DELETE /api/comments/{id}"""

    def test_patch_comment_votes(self, api_client, seeded_db):
        response = api_client.patch(comment_url(1), {'inc_votes': 1}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['votes'] == 17

    def test_patch_comment_votes_invalid(self, api_client, seeded_db):
        response = api_client.patch(comment_url(1), {'inc_votes': 'up'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_patch_comment_not_found(self, api_client, seeded_db):
        response = api_client.patch(comment_url(9999), {'inc_votes': 1}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_comment(self, api_client, seeded_db):
        response = api_client.delete(comment_url(1))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Comment.objects.filter(comment_id=1).exists()

    def test_delete_comment_not_found(self, api_client, seeded_db):
        response = api_client.delete(comment_url(9999))

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_comment_invalid_id(self, api_client, seeded_db):
        response = api_client.delete(comment_url('bananas'))

        assert response.status_code == status.HTTP_400_BAD_REQUEST


# =============================================================================
# Project-level Endpoints
# =============================================================================

@pytest.mark.django_db
class TestProjectEndpoints:
    """Index, health check and unknown routes."""

    def test_api_index(self, api_client):
        response = api_client.get('/api/')

        assert response.status_code == status.HTTP_200_OK
        endpoints = response.json()['endpoints']
        assert 'GET /api/reviews' in endpoints
        assert 'PATCH /api/comments/:comment_id' in endpoints

    def test_api_index_without_trailing_slash(self, api_client):
        response = api_client.get('/api')

        assert response.status_code == status.HTTP_200_OK
        assert 'GET /api/reviews' in response.json()['endpoints']

    def test_health_check(self, api_client):
        response = api_client.get('/api/health/')

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'status': 'ok', 'database': 'ok'}

    def test_unknown_route(self, api_client):
        response = api_client.get('/api/not-a-route')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {'message': 'Not Found'}

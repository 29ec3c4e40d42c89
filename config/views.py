from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.views.decorators.http import require_GET


def health_check(request):
    """Liveness probe that also pings the database."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError:
        return JsonResponse({'status': 'error', 'database': 'unavailable'}, status=503)

    return JsonResponse({'status': 'ok', 'database': 'ok'})


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({'message': 'Not Found'}, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({'message': 'Internal Server Error'}, status=500)


API_ENDPOINTS = {
    'GET /api': {
        'description': 'serves up a json representation of all the available endpoints of the api',
    },
    'GET /api/health': {
        'description': 'reports whether the service and its database are reachable',
    },
    'GET /api/categories': {
        'description': 'serves an array of all categories',
        'exampleResponse': {
            'categories': [
                {'slug': 'dexterity', 'description': 'Games involving physical skill'},
            ],
        },
    },
    'POST /api/categories': {
        'description': 'adds a category and serves it back',
        'exampleBody': {'slug': 'strategy', 'description': 'Plan ahead'},
    },
    'GET /api/reviews': {
        'description': 'serves a page of reviews with comment counts and the total number of matching reviews',
        'queries': ['category', 'sort_by', 'order_by', 'limit', 'p'],
        'exampleResponse': {
            'reviews': {
                'rows': [
                    {
                        'review_id': 2,
                        'title': 'Jenga',
                        'designer': 'Leslie Scott',
                        'owner': 'philippaclaire9',
                        'review_img_url': 'https://images.pexels.com/photos/4473494/pexels-photo-4473494.jpeg?w=700&h=700',
                        'category': 'dexterity',
                        'created_at': '2021-01-18T10:01:41.251Z',
                        'votes': 5,
                        'comment_count': 3,
                    },
                ],
                'total_count': 1,
            },
        },
    },
    'POST /api/reviews': {
        'description': 'adds a review and serves it back with comment_count',
        'exampleBody': {
            'owner': 'mallionaire',
            'title': 'Terraforming Mars',
            'review_body': 'My favourite game!',
            'designer': 'Jacob Fryxelius',
            'category': 'euro game',
        },
    },
    'GET /api/reviews/:review_id': {
        'description': 'serves a single review with its comment_count',
    },
    'PATCH /api/reviews/:review_id': {
        'description': 'changes the votes of a review and serves it back',
        'exampleBody': {'inc_votes': 1},
    },
    'DELETE /api/reviews/:review_id': {
        'description': 'deletes a review and its comments',
    },
    'GET /api/reviews/:review_id/comments': {
        'description': 'serves the comments of a review, newest first',
    },
    'POST /api/reviews/:review_id/comments': {
        'description': 'adds a comment to a review and serves it back',
        'exampleBody': {'username': 'bainesface', 'body': 'I loved this game too!'},
    },
    'PATCH /api/comments/:comment_id': {
        'description': 'changes the votes of a comment and serves it back',
        'exampleBody': {'inc_votes': 1},
    },
    'DELETE /api/comments/:comment_id': {
        'description': 'deletes a comment',
    },
    'GET /api/users': {
        'description': 'serves an array of all users',
    },
    'GET /api/users/:username': {
        'description': 'serves a single user',
    },
}


@require_GET
def api_index(request):
    """Describe every endpoint the API serves."""
    return JsonResponse({'endpoints': API_ENDPOINTS})

from rest_framework import viewsets, status, serializers
from rest_framework.permissions import IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, inline_serializer

from config.patterns import UUID_PATTERN

from .serializers import ArticleSerializer, ArticleFilterSerializer
from apps.articles.services import (
    create_article,
    get_article_by_id,
    list_articles,
    update_article,
    delete_article,
    ArticleNotFoundError,
)


def _not_found(e):
    return Response(
        {'message': 'Article not found', 'error': str(e)},
        status=status.HTTP_404_NOT_FOUND
    )


class ArticleViewSet(viewsets.GenericViewSet):
    """
    ViewSet for the shared article catalog.

    list: Get all articles (with filters)
    create: Add an article
    retrieve: Get a specific article
    update / partial_update: Change an article (partial in both cases)
    destroy: Remove an article
    """

    serializer_class = ArticleSerializer
    permission_classes = [IsAuthenticatedOrReadOnly]
    lookup_value_regex = UUID_PATTERN

    def get_queryset(self):
        return list_articles()

    @extend_schema(
        parameters=[
            OpenApiParameter('category', str, description='Filter by category'),
            OpenApiParameter('isAvailable', bool, description='Filter by availability'),
        ],
        responses={200: ArticleSerializer(many=True)},
    )
    def list(self, request):
        """
        Get catalog articles.

        Filters:
        - category: Only articles in this category
        - isAvailable: Only (un)available articles
        """
        filters = ArticleFilterSerializer(data=request.query_params.dict())
        filters.is_valid(raise_exception=True)

        articles = list_articles(
            category=filters.validated_data.get('category'),
            is_available=filters.validated_data.get('isAvailable'),
        )
        return Response(ArticleSerializer(articles, many=True).data)

    def create(self, request):
        """Add a new article to the catalog."""
        serializer = ArticleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        article = create_article(**serializer.validated_data)

        return Response(
            ArticleSerializer(article).data,
            status=status.HTTP_201_CREATED
        )

    def retrieve(self, request, pk=None):
        """Get a single article."""
        try:
            article = get_article_by_id(article_id=pk)
        except ArticleNotFoundError as e:
            return _not_found(e)

        return Response(ArticleSerializer(article).data)

    def update(self, request, pk=None):
        """Update an article. Omitted fields keep their current value."""
        serializer = ArticleSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            article = update_article(article_id=pk, data=serializer.validated_data)
        except ArticleNotFoundError as e:
            return _not_found(e)

        return Response(ArticleSerializer(article).data)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk)

    @extend_schema(
        responses={
            200: inline_serializer(
                name='DeleteArticleResponse',
                fields={'message': serializers.CharField()},
            ),
        },
    )
    def destroy(self, request, pk=None):
        """Remove an article from the catalog."""
        try:
            delete_article(article_id=pk)
        except ArticleNotFoundError as e:
            return _not_found(e)

        return Response({'message': 'Article deleted successfully'})

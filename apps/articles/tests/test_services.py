import pytest
from decimal import Decimal
from uuid import uuid4

from apps.articles.models import Article, Category, Unit
from apps.articles.services import (
    create_article,
    get_article_by_id,
    list_articles,
    update_article,
    delete_article,
    ArticleNotFoundError,
)


@pytest.mark.django_db
class TestArticleManagement:
    """Tests for article_management.py service functions."""

    def test_create_article_defaults(self):
        article = create_article(
            name='  Carrots ',
            price=Decimal('0.80'),
            category=Category.VEGETABLES,
        )

        assert article.name == 'Carrots'
        assert article.unit == Unit.PIECE
        assert article.is_available is True
        assert article.description == ''

    def test_create_free_article(self):
        """A zero price is a valid price."""
        article = create_article(name='Bag', price=Decimal('0.00'), category=Category.OTHER)

        assert article.price == Decimal('0.00')

    def test_get_article_not_found(self, db):
        with pytest.raises(ArticleNotFoundError):
            get_article_by_id(article_id=uuid4())

    def test_list_filters(self, apples, milk, sold_out_bread):
        assert set(list_articles()) == {apples, milk, sold_out_bread}
        assert list(list_articles(category=Category.DAIRY)) == [milk]
        assert set(list_articles(is_available=True)) == {apples, milk}
        assert list(list_articles(is_available=False)) == [sold_out_bread]
        assert list(list_articles(category=Category.BAKERY, is_available=True)) == []

    def test_update_article_partial(self, apples):
        updated = update_article(article_id=apples.id, data={'price': Decimal('3.10')})

        assert updated.price == Decimal('3.10')
        assert updated.name == 'Apples'
        assert updated.category == Category.FRUITS

    def test_update_article_not_found(self, db):
        with pytest.raises(ArticleNotFoundError):
            update_article(article_id=uuid4(), data={'name': 'x'})

    def test_delete_article(self, apples):
        delete_article(article_id=apples.id)

        assert not Article.objects.filter(id=apples.id).exists()

    def test_delete_article_not_found(self, db):
        with pytest.raises(ArticleNotFoundError):
            delete_article(article_id=uuid4())

import pytest
from decimal import Decimal
from uuid import uuid4
from django.urls import reverse
from rest_framework import status

from apps.articles.models import Article


@pytest.mark.django_db
class TestArticleRead:
    """Tests for GET /api/article and /api/article/{id}"""

    def test_list_is_public(self, api_client, apples, milk):
        url = reverse('articles:article-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [a['name'] for a in response.data] == ['Apples', 'Milk']

    def test_list_filter_category(self, api_client, apples, milk):
        url = reverse('articles:article-list')
        response = api_client.get(url, {'category': 'dairy'})

        assert [a['name'] for a in response.data] == ['Milk']

    def test_list_filter_availability(self, api_client, apples, sold_out_bread):
        url = reverse('articles:article-list')

        response = api_client.get(url, {'isAvailable': 'false'})
        assert [a['name'] for a in response.data] == ['Sourdough']

        response = api_client.get(url, {'isAvailable': 'true'})
        assert [a['name'] for a in response.data] == ['Apples']

    def test_list_invalid_category(self, api_client):
        url = reverse('articles:article-list')
        response = api_client.get(url, {'category': 'toys'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_retrieve(self, api_client, apples):
        url = reverse('articles:article-detail', kwargs={'pk': apples.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Apples'
        assert response.data['price'] == Decimal('2.50')
        assert response.data['unit'] == 'kg'
        assert response.data['isAvailable'] is True

    def test_retrieve_not_found(self, api_client):
        url = reverse('articles:article-detail', kwargs={'pk': uuid4()})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['message'] == 'Article not found'


@pytest.mark.django_db
class TestArticleWrite:
    """Tests for POST/PUT/PATCH/DELETE /api/article"""

    def test_create_requires_auth(self, api_client):
        url = reverse('articles:article-list')
        response = api_client.post(url, {'name': 'Eggs', 'price': '3.00', 'category': 'dairy'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert not Article.objects.exists()

    def test_create(self, authenticated_client):
        url = reverse('articles:article-list')
        data = {
            'name': 'Eggs',
            'price': '3.00',
            'category': 'dairy',
            'unit': 'pack',
            'imageUrl': 'https://example.com/eggs.png',
        }
        response = authenticated_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['name'] == 'Eggs'
        assert response.data['imageUrl'] == 'https://example.com/eggs.png'
        assert response.data['isAvailable'] is True
        assert Article.objects.get(name='Eggs').price == Decimal('3.00')

    def test_create_negative_price(self, authenticated_client):
        url = reverse('articles:article-list')
        data = {'name': 'Refund', 'price': '-1.00', 'category': 'other'}
        response = authenticated_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'price' in response.data['error']

    def test_create_unknown_unit(self, authenticated_client):
        url = reverse('articles:article-list')
        data = {'name': 'Rice', 'price': '1.00', 'category': 'other', 'unit': 'bushel'}
        response = authenticated_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'unit' in response.data['error']

    def test_create_blank_name(self, authenticated_client):
        url = reverse('articles:article-list')
        data = {'name': '   ', 'price': '1.00', 'category': 'other'}
        response = authenticated_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_put_is_partial(self, authenticated_client, apples):
        url = reverse('articles:article-detail', kwargs={'pk': apples.id})
        response = authenticated_client.put(url, {'price': '2.75'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.data['price'] == Decimal('2.75')
        assert response.data['name'] == 'Apples'

    def test_patch(self, authenticated_client, apples):
        url = reverse('articles:article-detail', kwargs={'pk': apples.id})
        response = authenticated_client.patch(url, {'isAvailable': False}, format='json')

        assert response.status_code == status.HTTP_200_OK
        apples.refresh_from_db()
        assert apples.is_available is False

    def test_update_not_found(self, authenticated_client):
        url = reverse('articles:article-detail', kwargs={'pk': uuid4()})
        response = authenticated_client.patch(url, {'price': '1.00'}, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete(self, authenticated_client, apples):
        url = reverse('articles:article-detail', kwargs={'pk': apples.id})
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['message'] == 'Article deleted successfully'
        assert not Article.objects.filter(id=apples.id).exists()

    def test_delete_not_found(self, authenticated_client):
        url = reverse('articles:article-detail', kwargs={'pk': uuid4()})
        response = authenticated_client.delete(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
import uuid


class Unit(models.TextChoices):
    KILOGRAM = 'kg', 'Kilogram'
    GRAM = 'g', 'Gram'
    LITRE = 'l', 'Litre'
    MILLILITRE = 'ml', 'Millilitre'
    PIECE = 'piece', 'Piece'
    PACK = 'pack', 'Pack'


class Category(models.TextChoices):
    FRUITS = 'fruits', 'Fruits'
    VEGETABLES = 'vegetables', 'Vegetables'
    DAIRY = 'dairy', 'Dairy'
    MEAT = 'meat', 'Meat'
    BAKERY = 'bakery', 'Bakery'
    BEVERAGES = 'beverages', 'Beverages'
    SNACKS = 'snacks', 'Snacks'
    HOUSEHOLD = 'household', 'Household'
    OTHER = 'other', 'Other'


class Article(models.Model):
    """Shared catalog entry."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200, db_index=True)
    description = models.TextField(blank=True)
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    unit = models.CharField(max_length=10, choices=Unit.choices, default=Unit.PIECE)
    category = models.CharField(max_length=20, choices=Category.choices)
    image_url = models.URLField(max_length=500, blank=True)
    is_available = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'articles'
        indexes = [
            models.Index(fields=['category', 'is_available'], name='articles_category_avail_idx'),
            models.Index(fields=['created_at'], name='articles_created_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return f"{self.name} ({self.price}/{self.unit})"

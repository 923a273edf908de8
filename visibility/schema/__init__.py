"""JSON-LD structured data generation."""

from visibility.schema.builder import (
    ArticleData,
    FAQItem,
    OrganizationData,
    PersonData,
    ProductAuthor,
    ProductData,
    SchemaBuilder,
)

__all__ = [
    "ArticleData",
    "FAQItem",
    "OrganizationData",
    "PersonData",
    "ProductAuthor",
    "ProductData",
    "SchemaBuilder",
]

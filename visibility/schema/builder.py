"""Schema.org JSON-LD builder.

Generates FAQPage, Product, Article, Organization and Person markup and
can pick the most appropriate type for a page from its HTML.
"""

import json
import re
from dataclasses import dataclass, field
from typing import Any, Literal

from bs4 import BeautifulSoup

SCHEMA_CONTEXT = "https://schema.org"
MAX_FEATURES = 10

SchemaObject = dict[str, Any]
PageKind = Literal["faq", "product", "article"]

PRICE_PATTERN = re.compile(r"\$\s*([\d,]+(?:\.\d{2})?)")
CURRENCY_PATTERN = re.compile(r"\$[\d,]+|€[\d,]+|£[\d,]+")


@dataclass
class FAQItem:
    question: str
    answer: str


@dataclass
class ProductAuthor:
    name: str
    job_title: str | None = None


@dataclass
class ProductData:
    name: str
    price: float
    description: str | None = None
    currency: str = "USD"
    features: list[str] = field(default_factory=list)
    url: str | None = None
    image: str | None = None
    brand: str | None = None
    availability: Literal["InStock", "OutOfStock", "PreOrder"] = "InStock"
    author: ProductAuthor | None = None


@dataclass
class ArticleData:
    headline: str
    description: str | None = None
    author: str | None = None
    publisher: str | None = None
    published_date: str | None = None
    modified_date: str | None = None
    url: str | None = None
    image: str | None = None
    keywords: list[str] = field(default_factory=list)


@dataclass
class Address:
    street: str | None = None
    city: str | None = None
    country: str | None = None


@dataclass
class OrganizationData:
    name: str
    url: str | None = None
    logo: str | None = None
    description: str | None = None
    email: str | None = None
    phone: str | None = None
    address: Address | None = None
    same_as: list[str] = field(default_factory=list)


@dataclass
class PersonData:
    name: str
    job_title: str | None = None
    url: str | None = None
    image: str | None = None
    email: str | None = None
    same_as: list[str] = field(default_factory=list)
    works_for: str | None = None
    description: str | None = None


def _base(schema_type: str) -> SchemaObject:
    return {"@context": SCHEMA_CONTEXT, "@type": schema_type}


def _set_optional(schema: SchemaObject, **values: Any) -> None:
    for key, value in values.items():
        if value:
            schema[key] = value


class SchemaBuilder:
    """Builds schema.org JSON-LD objects."""

    @staticmethod
    def faq(items: list[FAQItem]) -> SchemaObject:
        schema = _base("FAQPage")
        schema["mainEntity"] = [
            {
                "@type": "Question",
                "name": item.question,
                "acceptedAnswer": {"@type": "Answer", "text": item.answer},
            }
            for item in items
        ]
        return schema

    @staticmethod
    def product(data: ProductData) -> SchemaObject:
        schema = _base("Product")
        schema["name"] = data.name
        schema["offers"] = {
            "@type": "Offer",
            "price": data.price,
            "priceCurrency": data.currency,
            "availability": f"{SCHEMA_CONTEXT}/{data.availability}",
        }
        _set_optional(schema, description=data.description, url=data.url, image=data.image)
        if data.brand:
            schema["brand"] = {"@type": "Brand", "name": data.brand}
        if data.features:
            schema["additionalProperty"] = [
                {"@type": "PropertyValue", "name": "feature", "value": feature}
                for feature in data.features
            ]
        if data.author is not None:
            author: SchemaObject = {"@type": "Person", "name": data.author.name}
            _set_optional(author, jobTitle=data.author.job_title)
            schema["author"] = author
        return schema

    @staticmethod
    def article(data: ArticleData) -> SchemaObject:
        schema = _base("Article")
        schema["headline"] = data.headline
        _set_optional(
            schema,
            description=data.description,
            url=data.url,
            image=data.image,
            datePublished=data.published_date,
            dateModified=data.modified_date,
        )
        if data.keywords:
            schema["keywords"] = ", ".join(data.keywords)
        if data.author:
            schema["author"] = {"@type": "Person", "name": data.author}
        if data.publisher:
            schema["publisher"] = {"@type": "Organization", "name": data.publisher}
        return schema

    @staticmethod
    def organization(data: OrganizationData) -> SchemaObject:
        schema = _base("Organization")
        schema["name"] = data.name
        _set_optional(
            schema,
            url=data.url,
            logo=data.logo,
            description=data.description,
            email=data.email,
            telephone=data.phone,
            sameAs=data.same_as,
        )
        if data.address is not None:
            address: SchemaObject = {"@type": "PostalAddress"}
            _set_optional(
                address,
                streetAddress=data.address.street,
                addressLocality=data.address.city,
                addressCountry=data.address.country,
            )
            schema["address"] = address
        return schema

    @staticmethod
    def person(data: PersonData) -> SchemaObject:
        schema = _base("Person")
        schema["name"] = data.name
        _set_optional(
            schema,
            jobTitle=data.job_title,
            url=data.url,
            image=data.image,
            email=data.email,
            description=data.description,
            sameAs=data.same_as,
        )
        if data.works_for:
            schema["worksFor"] = {"@type": "Organization", "name": data.works_for}
        return schema

    @classmethod
    def from_html(
        cls, html: str, author: str | None = None, publisher: str | None = None
    ) -> SchemaObject:
        """Pick FAQ, Product or Article markup for a page and fill it from the HTML."""
        soup = BeautifulSoup(html, "html.parser")
        kind = detect_page_kind(soup)

        if kind == "faq":
            faqs = extract_faqs(soup)
            if faqs:
                return cls.faq(faqs)

        h1 = soup.find("h1")
        h1_text = h1.get_text().strip() if h1 is not None else ""

        if kind == "product":
            return cls.product(
                ProductData(
                    name=h1_text or "Product",
                    price=extract_price(soup) or 0,
                    features=extract_features(soup),
                )
            )

        meta_description = soup.find("meta", attrs={"name": "description"})
        if meta_description is not None and meta_description.has_attr("content"):
            description = meta_description["content"]
        else:
            first_p = soup.find("p")
            description = first_p.get_text().strip()[:160] if first_p is not None else ""

        if author is None:
            meta_author = soup.find("meta", attrs={"name": "author"})
            if meta_author is not None:
                author = meta_author.get("content")

        return cls.article(
            ArticleData(
                headline=h1_text or "Article",
                description=description,
                author=author,
                publisher=publisher,
            )
        )

    @staticmethod
    def to_script_tag(schema: SchemaObject | list[SchemaObject]) -> str:
        """Serialize schema to a JSON-LD <script> tag for the page <head>."""
        body = json.dumps(schema, indent=2, ensure_ascii=False)
        # Page text copied into the markup must not close the script element
        body = body.replace("</", "<\\/")
        return f'<script type="application/ld+json">\n{body}\n</script>'

    @classmethod
    def to_script_tag_multiple(cls, schemas: list[SchemaObject]) -> str:
        """Serialize several schemas into one <script> tag holding an array."""
        return cls.to_script_tag(schemas)


def detect_page_kind(soup: BeautifulSoup) -> PageKind:
    body = soup.body or soup
    text = body.get_text().lower()
    h1 = soup.find("h1")
    h1_text = h1.get_text().lower() if h1 is not None else ""

    if (
        "frequently asked" in text
        or "faq" in text
        or len(soup.select('dt, .faq, [class*="faq"]')) > 2
    ):
        return "faq"

    if (
        CURRENCY_PATTERN.search(text)
        or "add to cart" in text
        or "buy now" in text
        or "pricing" in h1_text
        or "per month" in text
        or "/month" in text
    ):
        return "product"

    return "article"


def extract_faqs(soup: BeautifulSoup) -> list[FAQItem]:
    faqs = []

    for dt in soup.find_all("dt"):
        question = dt.get_text().strip()
        dd = dt.find_next_sibling()
        answer = dd.get_text().strip() if dd is not None and dd.name == "dd" else ""
        if question and answer:
            faqs.append(FAQItem(question=question, answer=answer))

    if not faqs:
        for heading in soup.find_all(["h3", "h4"]):
            question = heading.get_text().strip()
            sibling = heading.find_next_sibling()
            answer = sibling.get_text().strip() if sibling is not None and sibling.name == "p" else ""
            if question and answer and "?" in question:
                faqs.append(FAQItem(question=question, answer=answer))

    return faqs


def extract_price(soup: BeautifulSoup) -> float | None:
    match = PRICE_PATTERN.search((soup.body or soup).get_text())
    if match is None:
        return None
    return float(match.group(1).replace(",", ""))


def extract_features(soup: BeautifulSoup) -> list[str]:
    features = []
    for item in soup.select("ul li, ol li"):
        text = item.get_text().strip()
        if 5 < len(text) < 200:
            features.append(text)
    return features[:MAX_FEATURES]

"""robots.txt, llms.txt and JSON-LD generation endpoints."""

from typing import Any

from fastapi import APIRouter

from api.config import get_settings
from api.exceptions import ValidationError
from api.schemas import ErrorResponse
from api.schemas.generate import (
    LLMSRequest,
    RobotsRequest,
    SchemaRequest,
    SchemaResponse,
    TextResponse,
)
from visibility.generators.llms import ContactInfo, LLMSConfig, LLMSPage, LLMSTextGenerator
from visibility.generators.robots import RobotsConfig, RobotsGenerator
from visibility.schema.builder import (
    Address,
    ArticleData,
    FAQItem,
    OrganizationData,
    PersonData,
    ProductAuthor,
    ProductData,
    SchemaBuilder,
    SchemaObject,
)

router = APIRouter(prefix="/generate", tags=["Generate"])


@router.post("/robots", response_model=TextResponse)
async def generate_robots(request: RobotsRequest) -> TextResponse:
    """Generate robots.txt with explicit AI crawler rules."""
    if request.block_training:
        content = RobotsGenerator.block_training(
            disallow=request.disallow, sitemap_url=request.sitemap_url
        )
    else:
        config = RobotsConfig(
            block_ai=request.block_ai,
            disallow=request.disallow,
            sitemap_url=request.sitemap_url,
            crawl_delay=request.crawl_delay,
        )
        if request.allow_ai is not None:
            config.allow_ai = request.allow_ai
        content = RobotsGenerator(config).generate()

    return TextResponse(content=content)


@router.post("/llms", response_model=TextResponse)
async def generate_llms(request: LLMSRequest) -> TextResponse:
    """Generate llms.txt for AI model indexing."""
    settings = get_settings()
    config = LLMSConfig(
        site_name=request.site_name,
        description=request.description,
        pages=[LLMSPage(**page.model_dump()) for page in request.pages],
        base_url=request.base_url,
        contact=ContactInfo(**request.contact.model_dump()) if request.contact else None,
        auto_summarize=request.auto_summarize,
    )

    if request.minimal:
        return TextResponse(content=LLMSTextGenerator.minimal(config))

    generator = LLMSTextGenerator(
        config,
        timeout=settings.llms_fetch_timeout_seconds,
        user_agent=settings.user_agent,
    )
    return TextResponse(content=await generator.generate())


def _build_schema(request: SchemaRequest) -> SchemaObject:
    data: dict[str, Any] = dict(request.data)

    if request.type == "auto":
        if not request.html:
            raise ValidationError("html is required for automatic schema detection", field="html")
        return SchemaBuilder.from_html(
            request.html, author=request.author, publisher=request.publisher
        )

    if request.type == "faq":
        items = [FAQItem(**item) for item in data.get("items", [])]
        return SchemaBuilder.faq(items)

    if request.type == "product":
        if isinstance(data.get("author"), dict):
            data["author"] = ProductAuthor(**data["author"])
        return SchemaBuilder.product(ProductData(**data))

    if request.type == "org":
        if isinstance(data.get("address"), dict):
            data["address"] = Address(**data["address"])
        return SchemaBuilder.organization(OrganizationData(**data))

    if request.type == "person":
        return SchemaBuilder.person(PersonData(**data))

    return SchemaBuilder.article(ArticleData(**data))


@router.post(
    "/schema",
    response_model=SchemaResponse,
    responses={422: {"model": ErrorResponse}},
)
async def generate_schema(request: SchemaRequest) -> SchemaResponse:
    """Generate JSON-LD schema markup."""
    try:
        schema = _build_schema(request)
    except TypeError as e:
        # Unknown or missing dataclass fields in request.data
        raise ValidationError(f"Invalid {request.type} schema data: {e}", field="data") from e

    return SchemaResponse(json_ld=schema, script_tag=SchemaBuilder.to_script_tag(schema))

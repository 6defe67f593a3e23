from functools import lru_cache
import logging
from typing import Callable

from storefront.application.ports.history import HistoryPort
from storefront.application.ports.pipeline import PipelineRequestFactory
from storefront.application.ports.store import StorePort
from storefront.application.ports.translator import TranslatorPort
from storefront.application.use_cases.review_form import ReviewForm, SubmitReview
from storefront.application.utils.review_rules import ReviewRules
from storefront.core.config import settings
from storefront.infrastructure.history.memory_history import MemoryHistory
from storefront.infrastructure.i18n.dict_translator import DictTranslator
from storefront.infrastructure.pipeline.http_pipeline import HttpPipelineClient
from storefront.infrastructure.pipeline.mock_pipeline import MockPipelineClient
from storefront.infrastructure.store.memory_store import MemoryStore


_store: MemoryStore | None = None


def get_store() -> StorePort:
    global _store
    if _store is None:
        _store = MemoryStore()
    return _store


@lru_cache
def get_history() -> HistoryPort:
    return MemoryHistory()


@lru_cache
def get_translator() -> TranslatorPort:
    return DictTranslator(locale=settings.LOCALE)


@lru_cache
def get_pipeline_factory() -> PipelineRequestFactory:
    logger = logging.getLogger(__name__)
    logger.info("PIPELINE_BASE_URL present=%s", bool(settings.PIPELINE_BASE_URL))
    logger.info("ENV=%s", settings.ENV)

    if not settings.PIPELINE_BASE_URL:
        if settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MockPipelineClient (base url missing, ENV=dev/local)")
            return MockPipelineClient()
        raise ValueError("PIPELINE_BASE_URL is required outside dev/local.")

    logger.info("Using HttpPipelineClient")
    return HttpPipelineClient()


def get_review_rules() -> ReviewRules:
    return ReviewRules(translator=get_translator(), max_length=settings.REVIEW_FORM_MAX_LENGTH)


def get_review_form_factory() -> Callable[[SubmitReview], ReviewForm]:
    rules = get_review_rules()

    def build(submit: SubmitReview) -> ReviewForm:
        return ReviewForm(rules=rules, submit=submit)

    return build

from __future__ import annotations

from storefront.application.ports.translator import TranslatorPort

CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        "reviews.review_form_rate_error": "Please rate the product",
        "reviews.review_form_error_author_empty": "Please enter your name",
        "reviews.review_form_error_length": "Please use no more than {length} characters",
        "reviews.review_form_author": "Name",
        "reviews.review_form_title": "Title",
        "reviews.review_form_text": "Review",
        "navigation.search": "Search",
        "navigation.home": "Home",
    },
    "de": {
        "reviews.review_form_rate_error": "Bitte bewerten Sie das Produkt",
        "reviews.review_form_error_author_empty": "Bitte geben Sie Ihren Namen ein",
        "reviews.review_form_error_length": "Bitte maximal {length} Zeichen verwenden",
        "reviews.review_form_author": "Name",
        "reviews.review_form_title": "Titel",
        "reviews.review_form_text": "Bewertung",
        "navigation.search": "Suche",
        "navigation.home": "Startseite",
    },
}


class DictTranslator(TranslatorPort):
    def __init__(self, locale: str = "en", catalogs: dict[str, dict[str, str]] | None = None) -> None:
        self._catalogs = catalogs or CATALOGS
        self._messages = self._catalogs.get(locale) or self._catalogs.get("en", {})

    def translate(self, key: str, **params: object) -> str:
        template = self._messages.get(key)
        if template is None:
            return key
        try:
            return template.format(**params)
        except (KeyError, IndexError):
            return template

"""
Client-side request checks for the Customers API.
"""

from trade360_common.errors import RequestValidationError

from .models import GetTranslationsRequest


def validate_translations_request(request: GetTranslationsRequest) -> None:
    """Reject translation requests the provider would refuse.

    Raises:
        RequestValidationError: languages missing or not positive, or no id filter set.
    """
    if not request.languages:
        raise RequestValidationError("Languages must be filled", {"field": "languages"})

    invalid = [language for language in request.languages if language <= 0]
    if invalid:
        raise RequestValidationError(
            "Languages must be positive language ids",
            {"field": "languages", "invalid": invalid}
        )

    if not any((request.sport_ids, request.location_ids, request.league_ids,
                request.market_ids, request.participant_ids)):
        raise RequestValidationError(
            "At least one of sport_ids, location_ids, league_ids, market_ids "
            "or participant_ids must be filled"
        )

"""Display locale resolution for API requests."""

from django.conf import settings


def get_supported_locales():
    return list(settings.LATTEFINDER_SUPPORTED_LOCALES)


def resolve_locale(request):
    """
    Pick the display locale for a request.

    Order: ``lang`` query param, the user's preferred language, then the
    default locale. Unsupported values are skipped.
    """
    supported = get_supported_locales()

    requested = request.query_params.get('lang')
    if requested in supported:
        return requested

    user = getattr(request, 'user', None)
    preferred = getattr(user, 'preferred_language', None) if user and user.is_authenticated else None
    if preferred in supported:
        return preferred

    return settings.LATTEFINDER_DEFAULT_LOCALE

"""Access to the app's own settings namespace.

Projects override values through a ``STREAMING`` dict in their Django
settings; missing keys fall back to DEFAULTS. Without any Django settings
(no ``DJANGO_SETTINGS_MODULE`` and no ``settings.configure()``) the
DEFAULTS apply as they are.
"""

import os
from typing import Any

from django.conf import ENVIRONMENT_VARIABLE, settings

DEFAULTS: dict[str, Any] = {
    "RECOMMENDATION_LIMIT": 3,
    "CURRENCY_SYMBOL": "$",
}


def streaming_setting(name: str) -> Any:
    if not settings.configured and not os.environ.get(ENVIRONMENT_VARIABLE):
        return DEFAULTS[name]
    user_settings = getattr(settings, "STREAMING", {})
    return user_settings.get(name, DEFAULTS[name])

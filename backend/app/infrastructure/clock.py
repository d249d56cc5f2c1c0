"""Clock - the only place the service reads the wall-clock date.

Routes take `today` through Depends(get_today); tests replace it with
app.dependency_overrides[get_today].
"""

from datetime import date


def get_today() -> date:
    return date.today()

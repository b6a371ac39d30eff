from datetime import date
from typing import Annotated

from fastapi import Depends

from seedtrack.services import dates
from seedtrack.services.catalog import TemplateCatalog, catalog


def get_today() -> date:
    """Resolved once per request so every task in a response shares one "today"."""
    return dates.today()


def get_catalog() -> TemplateCatalog:
    return catalog


Today = Annotated[date, Depends(get_today)]
Catalog = Annotated[TemplateCatalog, Depends(get_catalog)]

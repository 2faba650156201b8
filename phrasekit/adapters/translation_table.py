# phrasekit/adapters/translation_table.py
from typing import Any, Mapping, Optional, Sequence

import structlog

from phrasekit.core.ports.localizer import ILocalizer

logger = structlog.get_logger()


class TranslationTableLocalizer(ILocalizer):
    """
    In-memory localizer backed by a plain key -> display string mapping.

    Keys missing from the table resolve to themselves, so an incomplete
    table degrades to the untranslated literal instead of failing.
    """

    def __init__(self, table: Mapping[str, str], locale: Optional[str] = None):
        self._table = dict(table)
        self.locale = locale

    def lookup(self, key: str, args: Optional[Sequence[Any]] = None) -> str:
        template = self._table.get(key)
        if template is None:
            logger.debug("translation_missing", key=key, locale=self.locale)
            template = key

        if args:
            return template.format(*args)
        return template

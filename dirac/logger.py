"""
Package logger.

Records go to the "dirac" logger; attach a handler or call
``logging.basicConfig()`` to see them. Set ``DIRAC_LOGLVL=DEBUG`` to see how
each composition merged and cancelled its terms.
"""

import os
from logging import Logger, LoggerAdapter, NullHandler, getLogger


class DiracAdapter(LoggerAdapter):
    def __init__(self, logger: Logger):
        super().__init__(logger, {})

    def set_default_level(self, dflt_level: str):
        """Configure logging level.

        If the ``DIRAC_LOGLVL`` environment variable holds a valid level name
        it wins, otherwise ``dflt_level`` is used.
        """
        try:
            env_level = os.getenv("DIRAC_LOGLVL", dflt_level)
            self.setLevel(env_level)
        except ValueError:  # DIRAC_LOGLVL is not a valid level
            self.setLevel(dflt_level)


log = DiracAdapter(getLogger("dirac"))
"""
The default logger used by dirac.
"""

log.set_default_level("WARNING")
log.logger.addHandler(NullHandler())

## logging setup for geokernel

## Copyright (c) 2026 geokernel contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""logging configuration for **geokernel**

Library modules log through ``logging.getLogger(__name__)``, so every
record lands under the ``geokernel`` namespace and only DEBUG records
are emitted.  Nothing is printed unless an application configures
logging; ``setup_logging()`` does that for scripts and interactive
sessions: ::

   from geokernel.logging_config import setup_logging
   setup_logging(logging.DEBUG, log_file="kernel.log")
"""

import logging
import sys

LOGGER_NAME = "geokernel"

## record layout shared by every handler installed here
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _attach(logger, handler, level):
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(level=logging.INFO, log_file=None):
    """send ``geokernel`` records at ``level`` and above to stdout, and
    to ``log_file`` (truncated) when one is given.  Handlers installed
    by an earlier call are closed and replaced.  Returns the namespace
    logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)

    _attach(logger, logging.StreamHandler(sys.stdout), level)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode='w', encoding='utf-8'), level)

    logger.debug("logging to stdout%s at level %s",
                 " and {}".format(log_file) if log_file else "",
                 logging.getLevelName(level))
    return logger


__all__ = ["LOGGER_NAME", "setup_logging"]

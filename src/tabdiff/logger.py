"""Contains the name for the logger of tabdiff modules.

``tabdiff`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``DEBUG``: Registry changes and method dispatch.
* ``WARNING``: An indication that something unexpected
    happened, e.g. a derivative containing ``nan`` or ``inf`` values
    because of repeated or decreasing x samples.

By default, only messages of level ``WARNING`` are displayed.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``tabdiff.logger.tabdiff_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "tabdiff"
tabdiff_logger = logging.getLogger(logger_name)

"""Contains the name for the logger of SgolayKit modules.

``sgolaykit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``DEBUG``: Table builds and cache activity.
* ``WARNING``: The polynomial order is high enough for the Gram recurrence
    to lose float64 precision, or the weights miss their expected sum.

By default, only messages of level ``WARNING`` are displayed.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``sgolaykit.logger.sgolaykit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "sgolaykit"
sgolaykit_logger = logging.getLogger(logger_name)

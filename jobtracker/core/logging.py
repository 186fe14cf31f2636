"""Logging configuration for the jobtracker package.

Every module obtains its logger through :func:`setup_logging` so the API,
the job service and the client all share one log format.

Example:
    ```python
    from jobtracker.core.logging import setup_logging

    logger = setup_logging('job_service')
    logger.info('Created job 42')
    ```
"""
import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(logger_name: str) -> logging.Logger:
    """Return the named jobtracker logger, attaching the shared stream handler once.

    Names are short component labels such as ``'api'``, ``'job_service'``
    or ``'jobs_api'``. Calling it again for the same name returns
    the same logger without stacking a second handler.
    """
    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(logging.INFO)

        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

        logger.addHandler(handler)

    return logger

# Records from loggers set up elsewhere stay quiet unless configured
logging.getLogger().addHandler(logging.NullHandler())

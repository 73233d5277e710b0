import functools
import logging

from sqlalchemy.exc import IntegrityError

from showcase.utils.error_handler import DatabaseError


logger = logging.getLogger(__name__)


def db_exception_handler(func):
    """Translate store failures of an async query taking the session first."""
    @functools.wraps(func)
    async def inner_function(s, *args, **kwargs):
        error_msg = "database error, please try again later"

        try:
            return await func(s, *args, **kwargs)
        except IntegrityError as err:
            await s.rollback()
            logger.error(f"{func.__name__} violated a constraint: {err}")
            raise DatabaseError(func.__name__, err, error_msg)

    return inner_function
